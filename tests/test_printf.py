import io

import pytest

from ftlib.printf import printf, sprintf


def test_plain_text_passes_through():
    assert sprintf("hello world") == "hello world"


def test_percent_escape():
    assert sprintf("100%%") == "100%"


def test_trailing_percent_is_literal():
    assert sprintf("100%") == "100%"


def test_unknown_conversion_writes_nothing_and_keeps_argument():
    assert sprintf("%q%d", 5) == "5"


def test_char_from_code_and_string():
    assert sprintf("%c%c", ord("A"), "z") == "Az"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        sprintf("%c", "ab")


def test_string_and_null():
    assert sprintf("[%s]", "abc") == "[abc]"
    assert sprintf("%s", None) == "(null)"


def test_string_rejects_non_str():
    with pytest.raises(TypeError):
        sprintf("%s", 3)


@pytest.mark.parametrize("n", [0, 7, -42, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(sprintf("%d", n)) == n
    assert sprintf("%i", n) == sprintf("%d", n)


def test_decimal_wraps_to_32_bits():
    assert int(sprintf("%d", 2**31)) == -(2**31)


def test_unsigned_wraps_negative():
    assert int(sprintf("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 15, 16, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    lower = sprintf("%x", n)
    upper = sprintf("%X", n)
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_pointer_zero():
    assert sprintf("%p", 0) == "0x0"


def test_pointer_round_trip():
    text = sprintf("%p", 0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text, 16) == 0xDEADBEEF


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_integer_conversion_rejects_str():
    with pytest.raises(TypeError):
        sprintf("%x", "ff")


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s=%d%c", "x", -3, "\n", stream=out)
    assert out.getvalue() == "x=-3\n"
    assert count == len(out.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s %%", "ok")
    captured = capsys.readouterr().out
    assert captured == "ok %"
    assert count == len(captured)