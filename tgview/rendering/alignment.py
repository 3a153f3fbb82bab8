"""Layout of aligned reads as styled segments along the reference."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from tgview.rendering import colors
from tgview.rendering.colors import Style


class CigarOp(Enum):
    """CIGAR operations, keyed by their SAM code."""

    MATCH = "M"
    INS = "I"
    DEL = "D"
    REF_SKIP = "N"
    SOFT_CLIP = "S"
    HARD_CLIP = "H"
    PAD = "P"
    EQUAL = "="
    DIFF = "X"


_CONSUMES_REFERENCE = frozenset(
    {CigarOp.MATCH, CigarOp.DEL, CigarOp.REF_SKIP, CigarOp.EQUAL, CigarOp.DIFF}
)
_CONSUMES_QUERY = frozenset(
    {CigarOp.MATCH, CigarOp.INS, CigarOp.SOFT_CLIP, CigarOp.EQUAL, CigarOp.DIFF}
)

_SOFTCLIP_COLORS = {
    "A": colors.SOFTCLIP_A,
    "C": colors.SOFTCLIP_C,
    "G": colors.SOFTCLIP_G,
    "T": colors.SOFTCLIP_T,
}

Segment = Tuple[int, int, Style]


def consumes_reference(op: CigarOp) -> bool:
    """Whether the operation advances along the reference (M/D/N/=/X)."""
    return op in _CONSUMES_REFERENCE


def consumes_query(op: CigarOp) -> bool:
    """Whether the operation advances along the read (M/I/S/=/X)."""
    return op in _CONSUMES_QUERY


def cigar_style(op: CigarOp) -> Style:
    """Style of a segment drawn for an operation that consumes the reference."""
    if op in (CigarOp.MATCH, CigarOp.EQUAL):
        return Style().bg(colors.MATCH_COLOR)
    if op is CigarOp.DIFF:
        return Style().bg(colors.MISMATCH_COLOR)
    return Style()


def segment_string(length: int, is_reverse: Optional[bool]) -> str:
    """Text of one read segment.

    ``True`` marks the first segment (a leading ``<``), ``False`` the last
    (a trailing ``>``), and ``None`` a segment in between.
    """
    if length <= 0:
        return ""
    if is_reverse is True:
        return "<" + "-" * (length - 1)
    if is_reverse is False:
        return "-" * (length - 1) + ">"
    return "-" * length


def cigar_segments(
    cigar: Iterable[Tuple[CigarOp, int]],
    sequence: str,
    start: int,
    leading_softclips: int,
) -> List[Segment]:
    """Reference spans ``(start, end, style)`` of a read, 1-based and inclusive.

    Soft-clipped bases are laid out one base at a time, coloured by base,
    as long as they fall at position 1 or later.
    """
    reference_pivot = start
    query_pivot = 0
    output: List[Segment] = []

    for op, length in cigar:
        if op is CigarOp.SOFT_CLIP:
            for i_base in range(query_pivot, query_pivot + length):
                if reference_pivot + i_base >= 1 + leading_softclips:
                    position = reference_pivot + i_base - leading_softclips
                    base = sequence[i_base].upper()
                    color = _SOFTCLIP_COLORS.get(base, colors.SOFTCLIP_N)
                    output.append((position, position, Style().bg(color)))

        if consumes_reference(op):
            output.append(
                (reference_pivot, reference_pivot + length - 1, cigar_style(op))
            )
            reference_pivot += length

        if consumes_query(op):
            query_pivot += length

    return output