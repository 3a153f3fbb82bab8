"""Text and styles of gene and feature segments on the annotation track."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from tgview.rendering.colors import Color, Style

EXON_ARROW_GAP = 5
INTRON_ARROW_GAP = 10
GENE_ARROW_GAP = 5

EXON_BACKGROUND_COLOR = Color("blue-800", (0x1E, 0x40, 0xAF))
EXON_FOREGROUND_COLOR = Color("white", (0xFF, 0xFF, 0xFF))
GENE_BACKGROUND_COLOR = Color("blue-700", (0x1D, 0x4E, 0xD8))
NON_CDS_EXON_BACKGROUND_COLOR = Color("blue-500", (0x3B, 0x82, 0xF6))
INTRON_FOREGROUND_COLOR = Color("blue-300", (0x93, 0xC5, 0xFD))

NON_CDS_EXON_CHAR = "▅"


class Strand(Enum):
    """Strand a gene lies on."""

    FORWARD = "+"
    REVERSE = "-"

    @property
    def arrow(self) -> str:
        """Arrow pointing in the direction of transcription."""
        return ">" if self is Strand.FORWARD else "<"


class FeatureType(Enum):
    """Kind of a gene feature drawn on the track."""

    EXON = "exon"
    NON_CDS_EXON = "non_cds_exon"
    INTRON = "intron"


def _arrowed(length: int, arrow: str, filler: str, gap: int) -> str:
    return "".join(arrow if i % gap == 0 else filler for i in range(length))


def gene_segment(length: int, strand: Strand) -> Tuple[str, Style]:
    """Text and style of a gene drawn as one block."""
    text = _arrowed(length, strand.arrow, " ", GENE_ARROW_GAP)
    return text, Style().bg(GENE_BACKGROUND_COLOR)


def feature_segment(
    length: int, strand: Strand, feature_type: FeatureType
) -> Tuple[str, Style]:
    """Text and style of a single exon, non-coding exon or intron."""
    if feature_type is FeatureType.EXON:
        filler = " " if strand is Strand.FORWARD else "-"
        text = _arrowed(length, strand.arrow, filler, EXON_ARROW_GAP)
        style = Style().fg(EXON_FOREGROUND_COLOR).bg(EXON_BACKGROUND_COLOR)
    elif feature_type is FeatureType.NON_CDS_EXON:
        text = NON_CDS_EXON_CHAR * max(length, 0)
        style = Style().fg(NON_CDS_EXON_BACKGROUND_COLOR)
    else:
        text = _arrowed(length, strand.arrow, "-", INTRON_ARROW_GAP)
        style = Style().fg(INTRON_FOREGROUND_COLOR)
    return text, style