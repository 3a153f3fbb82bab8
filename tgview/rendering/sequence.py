"""Layout of reference bases on the sequence line."""

from __future__ import annotations

from typing import List, Tuple

from tgview.rendering import colors
from tgview.rendering.colors import Color, Style

HALF_BLOCK = "▌"

_BASE_COLORS = {
    "A": colors.BASE_A,
    "C": colors.BASE_C,
    "G": colors.BASE_G,
    "T": colors.BASE_T,
}

Cell = Tuple[int, str, Style]


def base_color(base: str) -> Color:
    """Colour of a nucleotide, case-insensitive; anything else is N."""
    return _BASE_COLORS.get(base.upper(), colors.BASE_N)


def sequence_cells(sequence: str) -> List[Cell]:
    """One cell per base: ``(x, base, style)``."""
    return [
        (x, base, Style().fg(colors.SEQUENCE_FOREGROUND_COLOR).bg(base_color(base)))
        for x, base in enumerate(sequence)
    ]


def sequence_cells_2x(sequence: str) -> List[Cell]:
    """One half-block cell per pair of bases; a trailing odd base is dropped."""
    return [
        (x, HALF_BLOCK, Style().fg(base_color(first)).bg(base_color(second)))
        for x, (first, second) in enumerate(zip(sequence[::2], sequence[1::2]))
    ]