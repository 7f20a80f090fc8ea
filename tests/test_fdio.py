import io

import pytest

from cubraycast.fdio import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("x", out)
    put_char("y", out)
    assert out.getvalue() == "xy"


@pytest.mark.parametrize("bad", ["", "ab", 65, None])
def test_put_char_rejects_non_characters(bad):
    with pytest.raises(ValueError):
        put_char(bad, io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("hello", out)
    assert out.getvalue() == "hello"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


def test_put_endl_empty_string_is_just_newline():
    out = io.StringIO()
    put_endl("", out)
    assert out.getvalue() == "\n"


@pytest.mark.parametrize("n", [0, 7, 42, -1, -99, 2147483647])
def test_put_nbr_matches_decimal(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_int_min():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_put_nbr_rejects_non_integers():
    with pytest.raises(TypeError):
        put_nbr(3.0, io.StringIO())


def test_sequence_of_writes_concatenates():
    out = io.StringIO()
    put_str("x=", out)
    put_nbr(5, out)
    put_char(";", out)
    put_endl("", out)
    assert out.getvalue() == "x=5;\n"