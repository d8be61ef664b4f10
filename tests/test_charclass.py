import string

import pytest

from ftlib.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_CODES = range(-5, 300)


def test_is_alpha_matches_ascii_letters():
    for code in ALL_CODES:
        expected = 0 <= code < 128 and chr(code) in string.ascii_letters
        assert is_alpha(code) is expected


def test_is_digit_matches_ascii_digits():
    for code in ALL_CODES:
        expected = 0 <= code < 128 and chr(code) in string.digits
        assert is_digit(code) is expected


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in ALL_CODES:
        assert is_alnum(code) is (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(32) is True
    assert is_print(126) is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_accepts_single_character_strings():
    assert is_alpha("s") is True
    assert is_digit("7") is True
    assert is_alnum("_") is False
    assert is_print(" ") is True


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        is_alpha("salut")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit(1.5)


@pytest.mark.parametrize("letter", list(string.ascii_uppercase))
def test_case_round_trip(letter):
    lowered = to_lower(letter)
    assert lowered == letter.lower()
    assert to_upper(lowered) == letter


def test_case_conversion_preserves_int_type():
    assert to_lower(ord("A")) == ord("a")
    assert to_upper(ord("b")) == ord("B")


def test_case_conversion_leaves_non_letters():
    for ch in "0123 !@[`{~":
        assert to_lower(ch) == ch
        assert to_upper(ch) == ch
    assert to_upper(200) == 200