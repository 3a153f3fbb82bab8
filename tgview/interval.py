"""Closed, 1-based genomic intervals."""

from __future__ import annotations

from typing import Any, Optional


class GenomeInterval:
    """Mixin for anything that spans ``start..=end`` on a contig.

    Subclasses supply ``contig``, ``start`` and ``end`` as attributes or
    properties. Coordinates are 1-based and inclusive.
    """

    contig: Any
    start: int
    end: int

    def length(self) -> int:
        """Number of bases covered, both ends included."""
        return self.end - self.start + 1

    def covers(self, position: int) -> bool:
        """Whether ``position`` lies inside the interval."""
        return self.start <= position <= self.end

    def overlaps(self, other: GenomeInterval) -> bool:
        """Whether the two intervals share at least one base."""
        return (
            self.contig == other.contig
            and self.start <= other.end
            and self.end >= other.start
        )

    def contains(self, other: GenomeInterval) -> bool:
        """Whether ``other`` lies entirely inside this interval."""
        return (
            self.contig == other.contig
            and self.start <= other.start
            and self.end >= other.end
        )

    def is_properly_bounded(self, end: Optional[int]) -> bool:
        """Whether start <= end, and end does not pass ``end`` when given."""
        if end is None:
            return self.start <= self.end
        return self.start <= self.end <= end

    def middle(self) -> int:
        """Middle coordinate, rounding up."""
        return -(-(self.start + self.end) // 2)