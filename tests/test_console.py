from tgview.rendering.colors import Style
from tgview.rendering.console import CURSOR_STYLE, console_cells


def test_too_narrow():
    assert console_cells("abc", 0, 1) == []


def test_cursor_at_end():
    cells = console_cells("KRAS", 4, 80)
    assert cells[0] == (0, ":", Style())
    assert cells[1] == (1, "KRAS", Style())
    assert cells[2] == (1 + len("KRAS"), " ", CURSOR_STYLE)


def test_cursor_inside_input():
    cells = console_cells("TP53", 1, 80)
    assert cells[-1] == (2, "P", CURSOR_STYLE)


def test_empty_input():
    cells = console_cells("", 0, 80)
    assert cells == [(0, ":", Style()), (1, " ", CURSOR_STYLE)]


def test_input_clipped_to_width():
    cells = console_cells("17:7572659", 10, 5)
    texts = [text for _, text, _ in cells]
    assert texts == [":", "17:7"]
    assert all(x + len(text) <= 5 for x, text, _ in cells)