import io

import pytest

from ftlib.output import put_char, put_endl, put_number, put_str


def test_put_char_string():
    out = io.StringIO()
    put_char("z", out)
    assert out.getvalue() == "z"


def test_put_char_code():
    out = io.StringIO()
    put_char(ord("A"), out)
    assert out.getvalue() == "A"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_char_defaults_to_stdout(capsys):
    put_char("q")
    assert capsys.readouterr().out == "q"


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("salut", out)
    assert out.getvalue() == "salut"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("hello", out)
    assert out.getvalue() == "hello\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


def test_put_number_int_min():
    out = io.StringIO()
    put_number(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, 2147483647, -1, -90210])
def test_put_number_round_trip(n):
    out = io.StringIO()
    put_number(n, out)
    assert int(out.getvalue()) == n
    assert out.getvalue().startswith("-") == (n < 0)


def test_put_number_defaults_to_stdout(capsys):
    put_number(-5)
    assert int(capsys.readouterr().out) == -5


def test_writes_accumulate():
    out = io.StringIO()
    put_str("a", out)
    put_char("b", out)
    put_endl("c", out)
    assert out.getvalue() == "abc\n"