import pytest

from tgview.rendering import colors
from tgview.rendering.colors import Style
from tgview.rendering.cytoband import (
    CytobandSegment,
    Stain,
    cytoband_placements,
    linear_scale,
    segment_placement,
    segment_style,
    total_length_text,
)


def test_total_length_small():
    assert total_length_text(999) == "999bp"


@pytest.mark.parametrize(
    "length, suffix",
    [(1, "bp"), (1000, "kb"), (248956422, "Mb"), (3_100_000_000, "Gb"), (10**12, "Tb")],
)
def test_total_length_units(length, suffix):
    text = total_length_text(length)
    assert text.endswith(suffix)
    assert 1 <= int(text[: -len(suffix)]) < 1000


def test_total_length_beyond_units_has_no_suffix():
    assert total_length_text(10**15).isdigit()


def test_linear_scale_ends():
    assert linear_scale(0, 1000, 12, 80) == 12
    assert linear_scale(1000, 1000, 12, 80) == 80


def test_linear_scale_monotonic():
    xs = [linear_scale(x, 500, 12, 73) for x in range(0, 501, 7)]
    assert xs == sorted(xs)
    assert all(12 <= x <= 73 for x in xs)


def test_segment_style():
    assert segment_style(Stain.GNEG) == Style()
    assert segment_style(Stain.ACEN) == Style().fg(colors.ACEN_COLOR)
    assert segment_style(Stain.GPOS100) == Style().fg(colors.GPOS100_COLOR)
    assert segment_style(Stain.GVAR) == Style().fg(colors.CYTOBAND_DEFAULT_COLOR)


def test_segment_too_narrow():
    segment = CytobandSegment(1, 1, Stain.GNEG)
    assert segment_placement(segment, 10**6, 12, 80, False) is None


def test_plain_segment():
    segment = CytobandSegment(1, 500, Stain.GPOS50)
    x, text, style = segment_placement(segment, 1000, 0, 100, False)
    assert x == 0
    assert len(text) == linear_scale(500, 1000, 0, 100)
    assert set(text) == {"▅"}
    assert style == Style().fg(colors.GPOS50_COLOR)


def test_centromere_arrows():
    segment = CytobandSegment(401, 500, Stain.ACEN)
    _, first, _ = segment_placement(segment, 1000, 0, 100, False)
    _, second, _ = segment_placement(segment, 1000, 0, 100, True)
    assert first.endswith(">") and set(first[:-1]) <= {"-"}
    assert second.startswith("<") and set(second[1:]) <= {"-"}


def test_placements_point_centromeres_together():
    segments = [
        CytobandSegment(1, 400, Stain.GNEG),
        CytobandSegment(401, 500, Stain.ACEN),
        CytobandSegment(501, 600, Stain.ACEN),
        CytobandSegment(601, 1000, Stain.GPOS25),
    ]
    placements = cytoband_placements(segments, 1000, 0, 100)
    assert len(placements) == 4
    assert placements[1][1].endswith(">")
    assert placements[2][1].startswith("<")
    xs = [x for x, _, _ in placements]
    assert xs == sorted(xs)
    for (x, text, _), (next_x, _, _) in zip(placements, placements[1:]):
        assert x + len(text) == next_x