"""Operations on raw byte buffers.

Buffers are bytearrays (or any writable bytes-like sequence of ints) and
positions are plain indices. Every operation checks its bounds and raises
ValueError instead of running off the end of a buffer.
"""

from __future__ import annotations

import operator
from typing import MutableSequence, Optional, Sequence

Buffer = MutableSequence[int]
ReadBuffer = Sequence[int]


def _count(n: int, what: str = "n") -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{what} must be non-negative, got {n}")
    return n


def _fits(buf: ReadBuffer, n: int, offset: int = 0, name: str = "buffer") -> None:
    if offset + n > len(buf):
        raise ValueError(
            f"{n} bytes at offset {offset} do not fit in a {name} of length {len(buf)}"
        )


def _byte(value: int) -> int:
    return operator.index(value) & 0xFF


def bzero(buf: Buffer, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    n = _count(n)
    _fits(buf, n)
    buf[:n] = bytes(n)


def mem_alloc(size: int) -> bytearray:
    """A new zero-filled buffer of size bytes."""
    return bytearray(_count(size, "size"))


def mem_ccpy(dst: Buffer, src: ReadBuffer, c: int, n: int) -> Optional[int]:
    """Copy bytes from src to dst, stopping after the first byte equal to c.

    At most n bytes are copied. Returns the index in dst just past the copied
    c, or None when c did not occur in the first n bytes of src.
    """
    n = _count(n)
    _fits(src, n, name="source")
    _fits(dst, n, name="destination")
    target = _byte(c)
    for index, value in enumerate(src[:n]):
        dst[index] = value
        if value == target:
            return index + 1
    return None


def mem_chr(buf: ReadBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to c among the first n bytes, or None."""
    n = _count(n)
    _fits(buf, n)
    target = _byte(c)
    return next(
        (index for index, value in enumerate(buf[:n]) if value == target), None
    )


def mem_cmp(a: ReadBuffer, b: ReadBuffer, n: int) -> int:
    """Difference of the first differing bytes within n bytes, 0 if none differ."""
    n = _count(n)
    _fits(a, n, name="first buffer")
    _fits(b, n, name="second buffer")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def mem_cpy(dst: Buffer, src: ReadBuffer, n: int) -> Buffer:
    """Copy the first n bytes of src over the start of dst; returns dst."""
    n = _count(n)
    _fits(src, n, name="source")
    _fits(dst, n, name="destination")
    dst[:n] = src[:n]
    return dst


def mem_move(buf: Buffer, dst: int, src: int, n: int) -> Buffer:
    """Move n bytes within buf from offset src to offset dst; overlap is safe."""
    n = _count(n)
    dst = _count(dst, "dst")
    src = _count(src, "src")
    _fits(buf, n, src)
    _fits(buf, n, dst)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def mem_set(buf: Buffer, value: int, n: int) -> Buffer:
    """Fill the first n bytes of buf with the low byte of value; returns buf."""
    n = _count(n)
    _fits(buf, n)
    buf[:n] = bytes([_byte(value)]) * n
    return buf


def swap_items(seq: MutableSequence, i: int, j: int) -> None:
    """Exchange the items at positions i and j of seq."""
    seq[i], seq[j] = seq[j], seq[i]