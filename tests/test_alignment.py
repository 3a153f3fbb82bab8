import pytest

from tgview.rendering import colors
from tgview.rendering.alignment import (
    CigarOp,
    cigar_segments,
    cigar_style,
    consumes_query,
    consumes_reference,
    segment_string,
)
from tgview.rendering.colors import Style


@pytest.mark.parametrize(
    "op, expected",
    [
        (CigarOp.MATCH, True),
        (CigarOp.DEL, True),
        (CigarOp.REF_SKIP, True),
        (CigarOp.EQUAL, True),
        (CigarOp.DIFF, True),
        (CigarOp.SOFT_CLIP, False),
        (CigarOp.INS, False),
        (CigarOp.HARD_CLIP, False),
        (CigarOp.PAD, False),
    ],
)
def test_consumes_reference(op, expected):
    assert consumes_reference(op) is expected


@pytest.mark.parametrize(
    "op, expected",
    [
        (CigarOp.MATCH, True),
        (CigarOp.INS, True),
        (CigarOp.SOFT_CLIP, True),
        (CigarOp.EQUAL, True),
        (CigarOp.DIFF, True),
        (CigarOp.DEL, False),
        (CigarOp.REF_SKIP, False),
        (CigarOp.HARD_CLIP, False),
        (CigarOp.PAD, False),
    ],
)
def test_consumes_query(op, expected):
    assert consumes_query(op) is expected


def test_cigar_op_from_code():
    assert CigarOp("M") is CigarOp.MATCH
    assert CigarOp("=") is CigarOp.EQUAL
    with pytest.raises(ValueError):
        CigarOp("Q")


def test_cigar_style():
    assert cigar_style(CigarOp.MATCH) == Style().bg(colors.MATCH_COLOR)
    assert cigar_style(CigarOp.EQUAL) == Style().bg(colors.MATCH_COLOR)
    assert cigar_style(CigarOp.DIFF) == Style().bg(colors.MISMATCH_COLOR)
    assert cigar_style(CigarOp.DEL) == Style()


@pytest.mark.parametrize("length", [1, 2, 7])
def test_segment_string_shapes(length):
    first = segment_string(length, True)
    last = segment_string(length, False)
    middle = segment_string(length, None)
    assert len(first) == len(last) == len(middle) == length
    assert first[0] == "<" and set(first[1:]) <= {"-"}
    assert last[-1] == ">" and set(last[:-1]) <= {"-"}
    assert set(middle) == {"-"}


def test_segment_string_empty():
    assert segment_string(0, True) == ""
    assert segment_string(0, None) == ""


def test_single_match():
    segments = cigar_segments([(CigarOp.MATCH, 10)], "A" * 10, 100, 0)
    assert len(segments) == 1
    start, end, style = segments[0]
    assert start == 100
    assert end - start + 1 == 10
    assert style == Style().bg(colors.MATCH_COLOR)


def test_leading_softclip_precedes_start():
    segments = cigar_segments(
        [(CigarOp.SOFT_CLIP, 2), (CigarOp.MATCH, 3)], "ACGTT", 10, 2
    )
    clip_a, clip_c, match = segments
    assert clip_a == (8, 8, Style().bg(colors.SOFTCLIP_A))
    assert clip_c == (9, 9, Style().bg(colors.SOFTCLIP_C))
    assert match[0] == 10
    assert match[1] - match[0] + 1 == 3


def test_softclip_before_genome_start_is_dropped():
    segments = cigar_segments(
        [(CigarOp.SOFT_CLIP, 2), (CigarOp.MATCH, 3)], "ACGTT", 1, 2
    )
    assert len(segments) == 1
    assert segments[0][0] == 1


def test_unknown_softclip_base():
    segments = cigar_segments(
        [(CigarOp.SOFT_CLIP, 1), (CigarOp.MATCH, 1)], "NA", 5, 1
    )
    assert segments[0][2] == Style().bg(colors.SOFTCLIP_N)


def test_deletion_is_contiguous():
    segments = cigar_segments(
        [(CigarOp.MATCH, 2), (CigarOp.DEL, 3), (CigarOp.MATCH, 2)], "AAAA", 20, 0
    )
    assert len(segments) == 3
    for (_, end, _), (next_start, _, _) in zip(segments, segments[1:]):
        assert next_start == end + 1
    assert segments[1][2] == Style()


def test_insertion_consumes_no_reference():
    segments = cigar_segments(
        [(CigarOp.MATCH, 2), (CigarOp.INS, 4), (CigarOp.MATCH, 2)], "A" * 8, 20, 0
    )
    assert len(segments) == 2
    assert segments[1][0] == segments[0][1] + 1