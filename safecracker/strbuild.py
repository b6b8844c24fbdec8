"""Building new strings from old ones.

Strings are immutable, so every function here returns its result rather
than writing into a buffer. A NUL character inside a source string ends it,
as it would in a terminated buffer. The one mutable kind of string is the
zero-filled bytearray made by str_new and cleared by str_clr.
"""

from __future__ import annotations

import operator
from typing import Callable, MutableSequence, Optional, Union

NUL = "\0"


def _terminated(text: str) -> str:
    """The part of text before its first NUL."""
    return text.split(NUL, 1)[0]


def _count(n: int, what: str) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{what} must be non-negative, got {n}")
    return n


def str_cat(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """s1 followed by s2; if either is None, s1 is returned unchanged."""
    if s1 is None or s2 is None:
        return s1
    return _terminated(s1) + _terminated(s2)


def str_ncat(dst: Optional[str], src: Optional[str], n: int) -> Optional[str]:
    """dst followed by at most n characters of src."""
    n = _count(n, "n")
    if dst is None or src is None:
        return dst
    return _terminated(dst) + _terminated(src)[:n]


def str_ncpy(src: Optional[str], n: int) -> Optional[str]:
    """Exactly n characters: the start of src, padded with NUL characters."""
    n = _count(n, "n")
    if src is None:
        return None
    return _terminated(src)[:n].ljust(n, NUL)


def str_dup(text: Optional[str]) -> Optional[str]:
    """A copy of text up to its first NUL; None for None."""
    if text is None:
        return None
    return _terminated(text)


def str_ndup(text: Optional[str], n: int) -> str:
    """At most the first n characters of text; None gives an empty string."""
    n = _count(n, "n")
    if text is None:
        return ""
    return _terminated(text)[:n]


def str_new(size: int) -> bytearray:
    """A zero-filled buffer with room for size characters and a terminator."""
    return bytearray(_count(size, "size") + 1)


def str_clr(buf: Optional[Union[bytearray, MutableSequence[str]]]) -> None:
    """Zero a buffer in place up to its first zero."""
    if buf is None:
        return
    if isinstance(buf, (bytes, bytearray)):
        zero: Union[int, str] = 0
    else:
        zero = NUL
    for index, item in enumerate(buf):
        if item == zero:
            break
        buf[index] = zero


def str_join(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """A new string holding s1 then s2; None if either is None."""
    if s1 is None or s2 is None:
        return None
    return _terminated(s1) + _terminated(s2)


def str_lcat(
    dst: Optional[str], src: Optional[str], size: int
) -> tuple[Optional[str], int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting string and the length the full concatenation would
    have had. When dst already fills the buffer it is left unchanged and the
    length is size plus the length of src.
    """
    size = _count(size, "size")
    if dst is None or src is None:
        return dst, len(dst or "") + len(src or "")
    dst = _terminated(dst)
    src = _terminated(src)
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def str_sub(text: Optional[str], start: int, length: int) -> Optional[str]:
    """The length characters of text beginning at start.

    Raises IndexError when the range runs past the end of text.
    """
    start = _count(start, "start")
    length = _count(length, "length")
    if text is None:
        return None
    if start + length > len(text):
        raise IndexError(
            f"substring {start}:{start + length} is outside a string of length {len(text)}"
        )
    return text[start:start + length]


def str_map(
    text: Optional[str], f: Optional[Callable[[str], str]]
) -> Optional[str]:
    """A new string with f applied to every character; None if either is None."""
    if text is None or f is None:
        return None
    return "".join(f(ch) for ch in _terminated(text))


def str_mapi(
    text: Optional[str], f: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Like str_map, with f also given each character's index."""
    if text is None or f is None:
        return None
    return "".join(f(i, ch) for i, ch in enumerate(_terminated(text)))


def str_iter(text: Optional[str], f: Optional[Callable[[str], object]]) -> None:
    """Call f on every character of text."""
    if text is None or f is None:
        return
    for ch in _terminated(text):
        f(ch)


def str_iteri(
    text: Optional[str], f: Optional[Callable[[int, str], object]]
) -> None:
    """Call f with the index and value of every character of text."""
    if text is None or f is None:
        return
    for i, ch in enumerate(_terminated(text)):
        f(i, ch)