import io

import pytest

from pushswap.printf import format_conversion, format_printf, printf, to_base


@pytest.mark.parametrize("n", [0, 1, 9, 10, 255, 4096, 123456789])
def test_to_base_round_trip_binary_and_hex(n):
    assert int(to_base(n, "01"), 2) == n
    assert int(to_base(n, "0123456789abcdef"), 16) == n


def test_to_base_zero_is_first_digit():
    assert to_base(0, "ab") == "a"


def test_to_base_rejects_negative():
    with pytest.raises(ValueError):
        to_base(-1, "0123456789")


def test_to_base_rejects_tiny_alphabet():
    with pytest.raises(ValueError):
        to_base(5, "0")


def test_null_string():
    assert format_conversion("s", None) == "(null)"


def test_nil_pointer():
    assert format_conversion("p", 0) == "(nil)"
    assert format_conversion("p", None) == "(nil)"


def test_pointer_prefix_and_value():
    text = format_conversion("p", 0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEADBEEF


@pytest.mark.parametrize("n", [0, 5, -5, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(format_printf("%d", n)) == n
    assert int(format_printf("%i", n)) == n


def test_decimal_wraps_to_signed_32_bit():
    assert int(format_printf("%d", 2147483648)) == -2147483648


def test_unsigned_wraps_negative():
    assert int(format_printf("%u", -1)) == 0xFFFFFFFF


@pytest.mark.parametrize("n", [0, 1, 255, 3054, 0xFFFFFFFF])
def test_hex_round_trip_and_case(n):
    lower = format_printf("%x", n)
    upper = format_printf("%X", n)
    assert int(lower, 16) == n
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_char_from_code_and_string():
    assert format_printf("%c%c", ord("h"), "i") == "hi"


def test_percent_literal_consumes_no_argument():
    assert format_printf("100%% %d", 7) == "100% 7"


def test_unknown_conversion_gives_nothing():
    assert format_printf("%q%d", 5) == "5"


def test_trailing_percent_is_dropped():
    assert format_printf("abc%") == "abc"


def test_plain_text_unchanged():
    assert format_printf("no conversions here") == "no conversions here"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s=%d;%s\n", "key", 12, None, stream=stream)
    assert stream.getvalue() == format_printf("%s=%d;%s\n", "key", 12, None)
    assert count == len(stream.getvalue())


def test_printf_counts_nul_character():
    stream = io.StringIO()
    count = printf("%c", 0, stream=stream)
    assert count == 1
    assert stream.getvalue() == "\0"


def test_printf_defaults_to_stdout(capsys):
    count = printf("Error\n")
    assert capsys.readouterr().out == "Error\n"
    assert count == len("Error\n")