import io

import pytest

from so_long.libft.linereader import LineReader, read_lines


def test_lines_keep_newlines():
    assert read_lines(io.StringIO("abc\nde\n")) == ["abc\n", "de\n"]


def test_last_line_without_newline():
    lines = read_lines(io.StringIO("one\ntwo"))
    assert lines[-1] == "two"
    assert "".join(lines) == "one\ntwo"


def test_empty_stream():
    reader = LineReader(io.StringIO(""))
    assert reader.next_line() is None
    assert reader.next_line() is None
    assert list(reader) == []


def test_empty_lines_are_returned():
    assert read_lines(io.StringIO("\n\nx\n")) == ["\n", "\n", "x\n"]


def test_exhausted_reader_stays_exhausted():
    reader = LineReader(io.StringIO("a\n"))
    assert reader.next_line() == "a\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 7, 10000])
def test_buffer_size_does_not_change_result(size):
    text = "11111\n1PCE1\n11111\nlast"
    lines = list(LineReader(io.StringIO(text), buffer_size=size))
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


def test_round_trip_many_lines():
    text = "".join(f"line {i}\n" for i in range(500))
    lines = read_lines(io.StringIO(text))
    assert len(lines) == 500
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines)


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size=size)