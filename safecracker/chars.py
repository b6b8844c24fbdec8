"""ASCII character classification and case conversion.

Each character predicate accepts either a one-character string or an
integer character code, and only recognises the ASCII ranges.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

SPACE_CHARS = " \t\n\v\f\r"


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_upper(c: Char) -> bool:
    """True for 'A'..'Z'."""
    return ord("A") <= _code(c) <= ord("Z")


def is_lower(c: Char) -> bool:
    """True for 'a'..'z'."""
    return ord("a") <= _code(c) <= ord("z")


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    return is_upper(c) or is_lower(c)


def is_digit(c: Char) -> bool:
    """True for '0'..'9'."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, codes 32..126."""
    return 32 <= _code(c) <= 126


def is_space(c: Char) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return _code(c) in {ord(ch) for ch in SPACE_CHARS}


def _shift(c: Char, delta: int) -> Char:
    code = _code(c) + delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    return _shift(c, 32) if is_upper(c) else c


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    return _shift(c, -32) if is_lower(c) else c


def str_to_lower(text: str) -> str:
    """Return text with its ASCII capitals lower-cased."""
    return "".join(to_lower(ch) for ch in text)


def str_to_upper(text: str) -> str:
    """Return text with its ASCII small letters upper-cased."""
    return "".join(to_upper(ch) for ch in text)


def cap_words(text: str) -> str:
    """Capitalise the first letter of every run of ASCII letters, lower-case the rest."""
    result = []
    first = True
    for ch in text:
        if not is_alpha(ch):
            first = True
            result.append(ch)
        else:
            result.append(to_upper(ch) if first else to_lower(ch))
            first = False
    return "".join(result)