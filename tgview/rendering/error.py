"""Selection of error messages for the error panel."""

from __future__ import annotations

from typing import List, Sequence

MIN_AREA_WIDTH = 2
MIN_AREA_HEIGHT = 1


def visible_errors(errors: Sequence[str], width: int, height: int) -> List[str]:
    """The most recent errors that fit, one per line, oldest first."""
    if width < MIN_AREA_WIDTH or height < MIN_AREA_HEIGHT:
        return []
    return list(errors[max(0, len(errors) - height):])