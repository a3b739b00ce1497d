import pytest

from so_long.printf import format_printf, printf


def test_plain_text_passes_through():
    assert format_printf("You win! Moves: ") == "You win! Moves: "


@pytest.mark.parametrize("n", [0, 1, 9, 10, 42, -7, 123456, -2147483647, 2147483647])
def test_decimal_matches_str(n):
    assert format_printf("%d", n) == str(n)
    assert format_printf("%i", n) == str(n)


def test_int_min():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert format_printf("%d", 2147483648) == "-2147483648"


def test_unsigned_of_negative_one():
    assert format_printf("%u", -1) == "4294967295"


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4096, 0xDEADBEEF])
def test_hex_matches_builtin(n):
    assert format_printf("%x", n) == format(n, "x")
    assert format_printf("%X", n) == format(n, "X")


def test_upper_hex_value():
    assert format_printf("%X", 255) == "FF"


def test_pointer_has_prefix():
    assert format_printf("%p", 255) == "0xff"
    assert format_printf("%p", None) == "0x" + format(0, "x")


def test_null_string():
    assert format_printf("%s", None) == "(null)"


def test_string_and_char():
    assert format_printf("%s-%c", "abc", "z") == "abc-z"
    assert format_printf("%c", ord("Q")) == "Q"


def test_percent_and_unknown():
    assert format_printf("100%%") == "100%"
    assert format_printf("%q") == "q"


def test_trailing_percent_stops_output():
    assert format_printf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d")


def test_bad_char_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%c", "ab")


def test_printf_writes_and_counts(capsys):
    count = printf("You win! Moves: %d\n", 12)
    captured = capsys.readouterr().out
    assert captured == format_printf("You win! Moves: %d\n", 12)
    assert count == len(captured)