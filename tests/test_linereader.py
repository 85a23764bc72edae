import io

import pytest

from minilex.linereader import LineReader


class _Growing:
    """A stream that can be extended after it has reported end of data."""

    def __init__(self) -> None:
        self.data = ""

    def read(self, size: int) -> str:
        chunk, self.data = self.data[:size], self.data[size:]
        return chunk


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_lines_rejoin_to_input(size):
    text = "first line\nsecond\n\nlast without newline"
    lines = list(LineReader(io.StringIO(text), size))
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


def test_lines_keep_newline_and_last_line_has_none():
    reader = LineReader(io.StringIO("a\nb"), 4)
    assert reader.readline() == "a\n"
    assert reader.readline() == "b"
    assert reader.readline() is None


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO(""), 8).readline() is None


def test_bytes_stream():
    data = b"one\ntwo\n"
    assert list(LineReader(io.BytesIO(data), 3)) == data.splitlines(keepends=True)


def test_empty_lines_are_returned():
    reader = LineReader(io.StringIO("\n\n"), 1)
    assert list(reader) == ["\n", "\n"]


@pytest.mark.parametrize("size", [0, -1])
def test_buffer_size_must_be_positive(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_data_appended_after_end_is_read():
    stream = _Growing()
    reader = LineReader(stream, 4)
    assert reader.readline() is None
    stream.data = "later\n"
    assert reader.readline() == "later\n"
    assert reader.readline() is None


def test_default_buffer_size_reads_long_lines():
    text = "x" * 200 + "\n" + "y" * 100
    assert list(LineReader(io.StringIO(text))) == text.splitlines(keepends=True)