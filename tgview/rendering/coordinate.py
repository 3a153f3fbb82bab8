"""Coordinate ruler: marker spacing and labels."""

from __future__ import annotations

from typing import Tuple

MIN_SPACING_BETWEEN_MARKERS = 15


def intermarker_distance(zoom: int) -> Tuple[int, int]:
    """Distance between ruler markers and its power of ten, for a zoom level."""
    distance = zoom * MIN_SPACING_BETWEEN_MARKERS
    power = 1
    while distance > 10:
        distance //= 10
        power += 1

    if distance < 2:
        return 2 * 10 ** (power - 1), power - 1
    return 10**power, power


_UNITS = ((3, 1, "bp"), (6, 1_000, "kb"), (9, 1_000_000, "Mb"), (12, 1_000_000_000, "Gb"))


def abbreviated_coordinate_text(coordinate: int, power: int) -> str:
    """Label for a marker, in a unit chosen from the marker spacing's power."""
    for limit, divisor, unit in _UNITS:
        if power < limit:
            return f"{thousand_separated(coordinate // divisor)}{unit}"
    return f"{thousand_separated(coordinate // 1_000_000_000_000)}Tb"


def thousand_separated(number: int) -> str:
    """The number with commas between groups of three digits."""
    return f"{number:,}"