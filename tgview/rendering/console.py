"""Layout of the command-mode console line."""

from __future__ import annotations

from typing import List, Tuple

from tgview.rendering.colors import Color, Style

MIN_AREA_WIDTH = 2

CURSOR_STYLE = Style().bg(Color("red"))


def console_cells(
    input_text: str, cursor_position: int, width: int
) -> List[Tuple[int, str, Style]]:
    """Strings to draw on the console line as ``(x, text, style)``.

    The line holds a ``:`` prompt, the typed input and a highlighted cursor,
    all clipped to ``width`` columns.
    """
    if width < MIN_AREA_WIDTH:
        return []

    cursor_char = (
        input_text[cursor_position] if cursor_position < len(input_text) else " "
    )
    cursor_x = 1 + cursor_position

    cells: List[Tuple[int, str, Style]] = [(0, ":", Style())]
    visible_input = input_text[: width - 1]
    if visible_input:
        cells.append((1, visible_input, Style()))
    if cursor_x < width:
        cells.append((cursor_x, cursor_char, CURSOR_STYLE))
    return cells