import io

import pytest

from safecracker.lines import iter_lines


def test_terminated_lines():
    assert list(iter_lines(io.StringIO("a\nb\n"))) == ["a", "b"]


def test_unterminated_last_line_and_blank_lines():
    assert list(iter_lines(io.StringIO("a\n\nb"))) == ["a", "", "b"]


def test_empty_stream_has_no_lines():
    assert list(iter_lines(io.StringIO(""))) == []


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 7, 32, 1000])
def test_chunk_size_does_not_change_result(chunk_size):
    text = "10\n2\n3\n\n  1  2  3\nlonger line than most chunks here\nend"
    expected = text.split("\n")
    assert list(iter_lines(io.StringIO(text), chunk_size)) == expected


def test_binary_stream():
    assert list(iter_lines(io.BytesIO(b"x\ny\n"), 1)) == [b"x", b"y"]


def test_is_lazy():
    lines = iter_lines(io.StringIO("first\nsecond\n"))
    assert next(lines) == "first"


@pytest.mark.parametrize("chunk_size", [0, -1])
def test_bad_chunk_size(chunk_size):
    with pytest.raises(ValueError):
        list(iter_lines(io.StringIO("a"), chunk_size))