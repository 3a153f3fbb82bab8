"""Binning of per-base read coverage for the coverage bar plot."""

from __future__ import annotations

from typing import List, Protocol, Tuple


class CoverageSource(Protocol):
    """What the binning needs from an alignment."""

    def coverage_at(self, position: int) -> int: ...

    def mean_basewise_coverage_in(self, left: int, right: int) -> float: ...


def round_up_max_coverage(x: int) -> int:
    """Round up to two significant digits, with a floor of 10."""
    if x < 10:
        return 10
    multiplier = 1
    round_up = False
    while x >= 100:
        if x % 10 > 0:
            round_up = True
        x //= 10
        multiplier *= 10
    return (x + 1) * multiplier if round_up else x * multiplier


def linear_space(left: int, right: int, n_bins: int) -> List[Tuple[int, int]]:
    """Split ``left..=right`` into ``n_bins`` contiguous 1-based inclusive bins."""
    if n_bins == 0:
        raise ValueError("n_bins is 0")
    if right <= left:
        raise ValueError("Right is less than left")
    if n_bins > right - left:
        raise ValueError("n_bins is greater than the number of bases in the region")

    bin_width = (right - left) / n_bins
    pivot = float(left)
    bins = []
    for i in range(n_bins):
        bin_left = left if i == 0 else int(pivot) + 1
        pivot += bin_width
        bin_right = right if i == n_bins - 1 else int(pivot)
        bins.append((bin_left, bin_right))
    return bins


def binned_coverage(
    alignment: CoverageSource, left: int, right: int, n_bins: int
) -> List[int]:
    """Coverage of ``left..=right`` in ``n_bins`` bins (1-based, inclusive)."""
    if right < left:
        raise ValueError("Right is less than left")
    if n_bins == 0:
        raise ValueError("n_bins is 0")

    n_bases = right - left + 1
    if n_bases < n_bins:
        raise ValueError("n_bins is greater than the number of bases in the region")
    if n_bases == n_bins:
        return [int(alignment.coverage_at(x)) for x in range(left, right + 1)]

    result = []
    for bin_left, bin_right in linear_space(left, right, n_bins):
        if bin_left > bin_right:
            raise ValueError("bin_left is greater than bin_right")
        result.append(int(alignment.mean_basewise_coverage_in(bin_left, bin_right)))
    return result