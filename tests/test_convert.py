import pytest

from ftlib.convert import atoi, itoa


def test_atoi_simple():
    assert atoi("42") == 42
    assert atoi("-42") == -42
    assert atoi("+42") == 42


def test_atoi_skips_whitespace():
    assert atoi(" \t\n\v\f\r 17") == 17


def test_atoi_stops_at_non_digit():
    assert atoi("  -123abc456") == -123


def test_atoi_no_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("-") == 0


def test_atoi_single_sign_only():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_large_value():
    text = "-2147483649000000000999999989"
    assert atoi(text) == int(text)


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, -21474836])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(0) == "0"
    assert itoa(-21474836) == "-21474836"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")