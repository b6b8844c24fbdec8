import pytest

from safecracker.strbuild import (
    str_cat,
    str_clr,
    str_dup,
    str_iter,
    str_iteri,
    str_join,
    str_lcat,
    str_map,
    str_mapi,
    str_ncat,
    str_ncpy,
    str_ndup,
    str_new,
    str_sub,
)

PAIRS = [("", ""), ("abc", ""), ("", "xyz"), ("safe", "cracker")]


@pytest.mark.parametrize("a, b", PAIRS)
def test_str_cat_starts_and_ends_with_parts(a, b):
    result = str_cat(a, b)
    assert result.startswith(a)
    assert result.endswith(b)
    assert len(result) == len(a) + len(b)


def test_str_cat_none_returns_first():
    assert str_cat("abc", None) == "abc"
    assert str_cat(None, "abc") is None


def test_str_cat_stops_at_nul():
    assert str_cat("ab\0zz", "cd") == str_cat("ab", "cd")


@pytest.mark.parametrize("n", [0, 1, 3, 10])
def test_str_ncat_limits_appended(n):
    result = str_ncat("base", "extra", n)
    assert result.startswith("base")
    assert len(result) == 4 + min(n, 5)


def test_str_ncat_none_and_negative():
    assert str_ncat(None, "x", 1) is None
    assert str_ncat("x", None, 1) == "x"
    with pytest.raises(ValueError):
        str_ncat("a", "b", -1)


@pytest.mark.parametrize("n", [0, 2, 5, 9])
def test_str_ncpy_has_exact_length_and_padding(n):
    result = str_ncpy("hello", n)
    assert len(result) == n
    assert result.rstrip("\0") == "hello"[:n]


def test_str_ncpy_pads_with_nul():
    assert str_ncpy("ab", 4) == "ab\0\0"


def test_str_dup_copies_and_handles_none():
    assert str_dup("copy me") == "copy me"
    assert str_dup("ab\0cd") == "ab"
    assert str_dup(None) is None


def test_str_ndup():
    assert str_ndup("hello", 3) == "hel"
    assert str_ndup("hi", 10) == "hi"
    assert str_ndup(None, 4) == ""


@pytest.mark.parametrize("size", [0, 1, 7])
def test_str_new_is_zero_filled_with_terminator(size):
    buf = str_new(size)
    assert len(buf) == size + 1
    assert all(b == 0 for b in buf)


def test_str_new_negative_raises():
    with pytest.raises(ValueError):
        str_new(-1)


def test_str_clr_bytearray_stops_at_first_zero():
    buf = bytearray(b"ab\0cd")
    str_clr(buf)
    assert buf == bytearray(b"\0\0\0cd")


def test_str_clr_list_of_chars():
    buf = list("xyz")
    str_clr(buf)
    assert buf == ["\0", "\0", "\0"]


@pytest.mark.parametrize("a, b", PAIRS)
def test_str_join_agrees_with_cat(a, b):
    assert str_join(a, b) == str_cat(a, b)


def test_str_join_none():
    assert str_join(None, "a") is None
    assert str_join("a", None) is None


def test_str_lcat_fits():
    assert str_lcat("ab", "cd", 10) == ("abcd", 4)


def test_str_lcat_truncates_to_buffer():
    result, total = str_lcat("ab", "cdef", 5)
    assert len(result) == 4
    assert result.startswith("ab")
    assert total == 6


def test_str_lcat_full_buffer_unchanged():
    result, total = str_lcat("abcd", "xyz", 3)
    assert result == "abcd"
    assert total == 3 + 3


def test_str_lcat_zero_size():
    assert str_lcat("ab", "cde", 0) == ("ab", 3)


def test_str_lcat_none():
    assert str_lcat(None, "abc", 5) == (None, 3)


@pytest.mark.parametrize("start, length", [(0, 0), (0, 5), (1, 3), (5, 0)])
def test_str_sub_slice(start, length):
    result = str_sub("hello", start, length)
    assert len(result) == length
    assert "hello".find(result, start) == start


def test_str_sub_errors():
    with pytest.raises(IndexError):
        str_sub("abc", 2, 5)
    with pytest.raises(ValueError):
        str_sub("abc", -1, 1)
    assert str_sub(None, 0, 1) is None


def test_str_map_applies_to_each_char():
    assert str_map("abc", str.upper) == "ABC"
    assert str_map(None, str.upper) is None
    assert str_map("abc", None) is None


def test_str_mapi_passes_indices():
    seen = []

    def record(i, ch):
        seen.append((i, ch))
        return ch

    assert str_mapi("xyz", record) == "xyz"
    assert seen == list(enumerate("xyz"))


def test_str_iter_visits_every_char():
    seen = []
    str_iter("hey", seen.append)
    assert seen == ["h", "e", "y"]


def test_str_iteri_visits_with_indices():
    seen = []
    str_iteri("ab", lambda i, ch: seen.append((i, ch)))
    assert seen == [(0, "a"), (1, "b")]


def test_str_iter_none_calls_nothing():
    seen = []
    str_iter(None, seen.append)
    str_iteri(None, lambda i, ch: seen.append(ch))
    assert seen == []