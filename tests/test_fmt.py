import pytest

from pipex.fmt import format_string, printf


def test_string_and_int():
    assert format_string("%s and %d", "x", 5) == "x and 5"


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_null_pointer():
    assert format_string("%p", 0) == "(nil)"


def test_pointer_is_prefixed_hex():
    out = format_string("%p", 255)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 255


@pytest.mark.parametrize("value", [1, 255, 4096, 123456789])
def test_hex_round_trip(value):
    lower = format_string("%x", value)
    upper = format_string("%X", value)
    assert int(lower, 16) == value
    assert lower == lower.lower()
    assert upper == upper.upper()
    assert upper.lower() == lower


def test_hex_zero():
    assert format_string("%x", 0) == "0"


def test_unsigned_wraps_negative():
    assert int(format_string("%u", -1)) == 0xFFFFFFFF


def test_signed_wraps_to_32_bits():
    assert int(format_string("%d", 2**31)) == -(2**31)


@pytest.mark.parametrize("value", [0, 7, -42, 2147483647])
def test_int_conversions_match(value):
    assert format_string("%d", value) == format_string("%i", value) == str(value)


def test_char_from_code_and_string():
    assert format_string("%c", ord("A")) == "A"
    assert format_string("%c", "z") == "z"


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_unknown_conversion_prints_following_char():
    assert format_string("%z") == "z"


def test_trailing_percent_gives_nul():
    assert format_string("ab%") == "ab\0"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%s %s", "only")


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%d\n", "n", 3)
    out = capsys.readouterr().out
    assert out == "n=3\n"
    assert count == len(out)