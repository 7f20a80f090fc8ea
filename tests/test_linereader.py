import io

import pytest

from cubraycast.linereader import LineReader, read_map_lines


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 42, 1000])
def test_lines_keep_newlines(buffer_size):
    reader = LineReader(io.StringIO("ab\ncd\nef"), buffer_size)
    assert reader.next_line() == "ab\n"
    assert reader.next_line() == "cd\n"
    assert reader.next_line() == "ef"
    assert reader.next_line() is None


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).next_line() is None


def test_iteration_reassembles_the_text():
    text = "111111\n100N01\n\n111111\n"
    assert "".join(LineReader(io.StringIO(text), 4)) == text


def test_line_longer_than_buffer():
    long_line = "x" * 100 + "\n"
    reader = LineReader(io.StringIO(long_line + "y"), 7)
    assert list(reader) == [long_line, "y"]


def test_empty_lines_are_returned():
    assert list(LineReader(io.StringIO("\n\na\n"))) == ["\n", "\n", "a\n"]


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)


def test_read_map_lines_strips_newlines():
    stream = io.StringIO("1111\n1N01\n1111")
    assert read_map_lines(stream) == ["1111", "1N01", "1111"]


def test_read_map_lines_empty():
    assert read_map_lines(io.StringIO("")) == []