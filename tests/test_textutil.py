import pytest

from pipex.textutil import atoi, itoa, split, strnstr, strtrim


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  42", 42),
        ("-17abc", -17),
        ("+8", 8),
        ("\t\n\v\f\r 7", 7),
        ("+-5", 0),
        ("--5", 0),
        ("abc", 0),
        ("", 0),
        ("12 34", 12),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("n", [0, 1, -1, 123, -456, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_zero():
    assert itoa(0) == "0"


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_split_drops_empty_pieces():
    assert split("a::b:", ":") == ["a", "b"]
    assert split(":/usr/bin:/bin", ":") == ["/usr/bin", "/bin"]


def test_split_empty_text():
    assert split("", ":") == []


def test_split_without_separator_keeps_whole_text():
    assert split("abc", ":") == ["abc"]


@pytest.mark.parametrize("sep", ["", "::"])
def test_split_rejects_bad_separator(sep):
    with pytest.raises(ValueError):
        split("a:b", sep)


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  a b  ", " ") == "a b"
    assert strtrim("xyx", "xy") == ""
    assert strtrim("abc", "") == "abc"


def test_strnstr_finds_match_within_limit():
    haystack = "hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert haystack[index:].startswith("world")


def test_strnstr_match_must_fit_in_limit():
    assert strnstr("hello world", "world", 8) is None


def test_strnstr_missing():
    assert strnstr("hello", "xyz", 5) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0