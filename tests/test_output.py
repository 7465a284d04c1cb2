import io

import pytest

from minishell.output import put_char, put_endl, put_number, put_str


def test_put_char_writes_character():
    out = io.StringIO()
    put_char("x", out)
    assert out.getvalue() == "x"


def test_put_char_rejects_string():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str_writes_string():
    out = io.StringIO()
    put_str("minishell: ", out)
    put_str("ls", out)
    assert out.getvalue() == "minishell: " + "ls"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_single_newline():
    out = io.StringIO()
    put_endl("PATH=/bin", out)
    assert out.getvalue() == "PATH=/bin\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


def test_put_number_zero():
    out = io.StringIO()
    put_number(0, out)
    assert out.getvalue() == "0"


def test_put_number_int_min():
    out = io.StringIO()
    put_number(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [1, 7, 42, -1, -305, 2147483647, 1000000])
def test_put_number_round_trip(n):
    out = io.StringIO()
    put_number(n, out)
    assert int(out.getvalue()) == n


def test_default_stream_is_stdout(capsys):
    put_endl("hello")
    assert capsys.readouterr().out == "hello\n"