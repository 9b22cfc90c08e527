import pytest

from hwreport.stringutils import (
    count_substring,
    get_value,
    split,
    split_char,
    split_get_index,
    strip,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (" \tabc\n ", "abc"),
        ("abc", "abc"),
        ("   ", ""),
        ("\n", ""),
        ("x", "x"),
        ("", ""),
        ("\ta b\t", "a b"),
    ],
)
def test_strip(raw, expected):
    assert strip(raw) == expected


def test_strip_keeps_carriage_return():
    assert strip("\r value \r") == "\r value \r"


@pytest.mark.parametrize(
    "text, delimiter",
    [("a  b  c", "  "), ("abc", ","), ("", ":"), ("x::y::", "::"), ("::", "::")],
)
def test_split_join_round_trip(text, delimiter):
    parts = split(text, delimiter)
    assert delimiter.join(parts) == text
    assert len(parts) == count_substring(text, delimiter) + 1


def test_split_keeps_tail():
    assert split("8086  Intel Corporation", "  ") == ["8086", "Intel Corporation"]


def test_split_empty_delimiter_rejected():
    with pytest.raises(ValueError):
        split("abc", "")


def test_count_substring_non_overlapping():
    assert count_substring("aaaa", "aa") == len(split("aaaa", "aa")) - 1


def test_count_substring_empty_rejected():
    with pytest.raises(ValueError):
        count_substring("abc", "")


def test_split_char_drops_unterminated_tail():
    assert split_char("a\nb", "\n") == ["a"]
    assert split_char("a\nb\n", "\n") == ["a", "b"]
    assert split_char("no newline", "\n") == []


def test_split_char_requires_single_character():
    with pytest.raises(ValueError):
        split_char("a::b", "::")


@pytest.mark.parametrize("index, expected", [(0, "a"), (2, "c"), (-1, "c"), (-3, "a")])
def test_split_get_index(index, expected):
    assert split_get_index("a/b/c", "/", index) == expected


@pytest.mark.parametrize("index", [3, 10, -4, -100])
def test_split_get_index_out_of_range(index):
    assert split_get_index("a/b/c", "/", index) == ""


def test_get_value_in_range():
    assert get_value(["x", "y"], 1, "<unknown>") == "y"


@pytest.mark.parametrize("index", [2, 5, -1])
def test_get_value_out_of_range(index):
    assert get_value([10, 20], index, -1) == -1