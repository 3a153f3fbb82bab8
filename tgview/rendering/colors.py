"""Colour palette and cell styles used by the renderers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class Color:
    """A terminal colour: a palette name, with an RGB value when it has one."""

    name: str
    rgb: Optional[Tuple[int, int, int]] = None


@dataclass(frozen=True)
class Style:
    """Foreground and background colours of a cell; ``None`` means default."""

    foreground: Optional[Color] = None
    background: Optional[Color] = None

    def fg(self, color: Color) -> Style:
        """A copy of this style with the given foreground."""
        return replace(self, foreground=color)

    def bg(self, color: Color) -> Style:
        """A copy of this style with the given background."""
        return replace(self, background=color)


_GRAY_300 = Color("gray-300", (0xD1, 0xD5, 0xDB))
_GRAY_500 = Color("gray-500", (0x6B, 0x72, 0x80))
_GRAY_900 = Color("gray-900", (0x11, 0x18, 0x27))
_RED_300 = Color("red-300", (0xFC, 0xA5, 0xA5))
_RED_800 = Color("red-800", (0x99, 0x1B, 0x1B))
_GREEN_200 = Color("green-200", (0xBB, 0xF7, 0xD0))
_GREEN_300 = Color("green-300", (0x86, 0xEF, 0xAC))
_GREEN_500 = Color("green-500", (0x22, 0xC5, 0x5E))
_GREEN_700 = Color("green-700", (0x15, 0x80, 0x3D))
_GREEN_900 = Color("green-900", (0x14, 0x53, 0x2D))
_BLUE_300 = Color("blue-300", (0x93, 0xC5, 0xFD))
_YELLOW_300 = Color("yellow-300", (0xFD, 0xE0, 0x47))

# Alignment
MATCH_COLOR = _GRAY_500
MISMATCH_COLOR = Color("rgb", (251, 198, 207))
SOFTCLIP_A = Color("light_red")
SOFTCLIP_C = Color("light_green")
SOFTCLIP_G = Color("light_blue")
SOFTCLIP_T = Color("light_yellow")
SOFTCLIP_N = Color("light_magenta")

# Cytoband
HIGHLIGHT_COLOR = _RED_800
CYTOBAND_DEFAULT_COLOR = _GRAY_300
GPOS25_COLOR = _GREEN_200
GPOS50_COLOR = _GREEN_500
GPOS75_COLOR = _GREEN_700
GPOS100_COLOR = _GREEN_900
ACEN_COLOR = _RED_300
GVAR_COLOR = CYTOBAND_DEFAULT_COLOR
STALK_COLOR = CYTOBAND_DEFAULT_COLOR
OTHER_COLOR = CYTOBAND_DEFAULT_COLOR

# Sequence
SEQUENCE_FOREGROUND_COLOR = _GRAY_900
BASE_A = _RED_300
BASE_C = _GREEN_300
BASE_G = _BLUE_300
BASE_T = _YELLOW_300
BASE_N = _GRAY_300