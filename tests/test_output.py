import io

import pytest

from so_long.libft.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("z", out)
    assert out.getvalue() == "z"


def test_put_char_rejects_longer_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("so_long", out)
    assert out.getvalue() == "so_long"


def test_put_str_rejects_non_string():
    with pytest.raises(TypeError):
        put_str(5, io.StringIO())


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("hello", out)
    assert out.getvalue() == "hello\n"


def test_put_nbr_minimum_int():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647, -100])
def test_put_nbr_round_trips(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_writes_accumulate():
    out = io.StringIO()
    put_str("Moves: ", out)
    put_nbr(3, out)
    put_endl("", out)
    assert out.getvalue() == "Moves: 3\n"


def test_default_stream_is_stdout(capsys):
    put_endl("shown")
    assert capsys.readouterr().out == "shown\n"