"""Layout of a chromosome's cytoband ideogram."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from tgview.rendering import colors
from tgview.rendering.colors import Style

CYTOBAND_TEXT_LEFT_SPACING = 12
CYTOBAND_TEXT_RIGHT_SPACING = 7

Placement = Tuple[int, str, Style]


class Stain(Enum):
    """Giemsa stain of a cytoband segment."""

    GNEG = "gneg"
    GPOS25 = "gpos25"
    GPOS50 = "gpos50"
    GPOS75 = "gpos75"
    GPOS100 = "gpos100"
    ACEN = "acen"
    GVAR = "gvar"
    STALK = "stalk"
    OTHER = "other"


@dataclass(frozen=True)
class CytobandSegment:
    """One band of a chromosome, 1-based and inclusive."""

    start: int
    end: int
    stain: Stain
    name: str = ""


_STAIN_COLORS = {
    Stain.GPOS25: colors.GPOS25_COLOR,
    Stain.GPOS50: colors.GPOS50_COLOR,
    Stain.GPOS75: colors.GPOS75_COLOR,
    Stain.GPOS100: colors.GPOS100_COLOR,
    Stain.ACEN: colors.ACEN_COLOR,
    Stain.GVAR: colors.GVAR_COLOR,
    Stain.STALK: colors.STALK_COLOR,
    Stain.OTHER: colors.OTHER_COLOR,
}

_LENGTH_UNITS = ("bp", "kb", "Mb", "Gb", "Tb")


def total_length_text(length: int) -> str:
    """Chromosome length, truncated to its largest thousand unit."""
    power = 0
    while length >= 1000:
        length //= 1000
        power += 1
    unit = _LENGTH_UNITS[power] if power < len(_LENGTH_UNITS) else ""
    return f"{length}{unit}"


def linear_scale(
    original_x: int, original_length: int, new_start: int, new_end: int
) -> int:
    """Map a position in ``0..original_length`` onto ``new_start..new_end``."""
    return new_start + int(original_x / original_length * (new_end - new_start))


def segment_style(stain: Stain) -> Style:
    """Style of a band with the given stain."""
    color = _STAIN_COLORS.get(stain)
    return Style() if color is None else Style().fg(color)


def segment_placement(
    segment: CytobandSegment,
    total_length: int,
    area_start: int,
    area_end: int,
    second_centromere: bool,
) -> Optional[Placement]:
    """Screen column, text and style of one band, or None if it has no width."""
    x_start = linear_scale(segment.start - 1, total_length, area_start, area_end)
    x_end = linear_scale(segment.end, total_length, area_start, area_end)
    if x_end <= x_start:
        return None

    width = x_end - x_start
    style = segment_style(segment.stain)
    if segment.stain is Stain.ACEN:
        if second_centromere:
            text = "<" + "-" * (width - 1)
        else:
            text = "-" * (width - 1) + ">"
    else:
        text = "▅" * width
    return x_start, text, style


def cytoband_placements(
    segments: Iterable[CytobandSegment],
    total_length: int,
    area_start: int,
    area_end: int,
) -> List[Placement]:
    """Placements of all visible bands; centromere halves point at each other."""
    second_centromere = False
    output: List[Placement] = []
    for segment in segments:
        placement = segment_placement(
            segment, total_length, area_start, area_end, second_centromere
        )
        if placement is not None:
            output.append(placement)
        if segment.stain is Stain.ACEN:
            second_centromere = True
    return output