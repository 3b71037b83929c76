from pagesort.core.config import SortConfig
from pagesort.core.sorting.segments import split_segments


def test_divider_starts_new_segment():
    assert split_segments(["b", "---", "a"]) == [["b"], ["---", "a"]]


def test_single_capital_letter_is_a_breaker():
    assert split_segments(["B", "---", "A"]) == [["B"], ["---"], ["A"]]


def test_sticky_header_starts_new_segment():
    assert split_segments(["zebra", "ALPHA", "beta"]) == [["zebra"], ["ALPHA", "beta"]]


def test_leading_breaker_heads_first_segment():
    assert split_segments(["TITLE", "b", "a"]) == [["TITLE", "b", "a"]]


def test_adjacent_breakers_stay_adjacent():
    assert split_segments(["ONE", "---", "TWO", "x"]) == [["ONE"], ["---"], ["TWO", "x"]]


def test_empty_input():
    assert split_segments([]) == []


def test_only_dividers_break_when_headers_do_not():
    config = SortConfig(sticky_breaks_segments=False)
    assert split_segments(["zebra", "ALPHA", "beta"], config) == [["zebra", "ALPHA", "beta"]]
    assert split_segments(["a", "---", "TOP", "b"], config) == [["a"], ["---", "TOP", "b"]]


def test_segments_concatenate_to_input():
    labels = ["x", "", "HEAD", "b", "a", "--", "--", "\U0001F680 go", "z"]
    segments = split_segments(labels)
    assert [label for segment in segments for label in segment] == labels
