"""Integer parsing, formatting and small arithmetic helpers."""

from __future__ import annotations

import operator
from itertools import takewhile

from .chars import SPACE_CHARS, is_digit

DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def parse_int(text: str) -> int:
    """Parse a leading decimal integer, atoi style.

    Leading whitespace is skipped, one optional sign is read, then digits up to
    the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(SPACE_CHARS)
    negative = False
    if rest[:1] in ("+", "-") and rest:
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest))
    value = int(digits) if digits else 0
    return -value if negative else value


def int_to_str(n: int) -> str:
    """Render an integer in decimal."""
    return str(operator.index(n))


def _check_base(base: int) -> int:
    base = operator.index(base)
    if not 2 <= base <= len(DIGITS):
        raise ValueError(f"base must be between 2 and {len(DIGITS)}, got {base}")
    return base


def int_to_base(n: int, base: int) -> str:
    """Render an integer in the given base using upper-case digits.

    Base 10 accepts any integer; other bases accept only non-negative values.
    """
    n = operator.index(n)
    base = _check_base(base)
    if base == 10:
        return int_to_str(n)
    if n < 0:
        raise ValueError("negative numbers are only supported in base 10")
    out = []
    while True:
        n, rem = divmod(n, base)
        out.append(DIGITS[rem])
        if n == 0:
            break
    return "".join(reversed(out))


def num_len(n: int, base: int) -> int:
    """Number of characters needed to write n in base, counting a minus sign."""
    n = operator.index(n)
    base = _check_base(base)
    length = 1
    if n < 0:
        length += 1
        n = -n
    while n >= base:
        n //= base
        length += 1
    return length


def int_pow(n: int, exp: int) -> int:
    """Raise n to a non-negative integer power."""
    exp = operator.index(exp)
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    for _ in range(exp):
        result *= n
    return result