"""C-style string comparison and searching.

Results that point into a string are returned as indices. The end of a
string behaves like a NUL terminator: searching for "\\0" finds the index
just past the last character.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Union

NUL = "\0"


def _char(c: Union[str, int]) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _at(text: str, index: int) -> str:
    return text[index] if index < len(text) else NUL


def _diff(s1: str, s2: str, limit: Optional[int]) -> int:
    pairs = zip_longest(s1, s2, fillvalue=NUL)
    if limit is not None:
        pairs = islice(pairs, max(limit, 0))
    for a, b in pairs:
        if a != b or a == NUL:
            return ord(a) - ord(b)
    return 0


def str_len(text: Optional[str]) -> int:
    """Length of text; None counts as empty."""
    return 0 if text is None else len(text)


def str_cmp(s1: Optional[str], s2: Optional[str]) -> int:
    """Difference of the first differing character codes, 0 when equal.

    A missing argument compares equal to anything.
    """
    if s1 is None or s2 is None:
        return 0
    return _diff(s1, s2, None)


def str_ncmp(s1: Optional[str], s2: Optional[str], n: int) -> int:
    """Like str_cmp, looking at no more than n characters."""
    if s1 is None or s2 is None:
        return 0
    return _diff(s1, s2, n)


def str_equ(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are equal, or both are None."""
    if s1 is None or s2 is None:
        return s1 is s2
    return s1 == s2


def str_nequ(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when the first n characters match.

    With a None argument the answer is inverted: two Nones give False and a
    single None gives True.
    """
    if s1 is None or s2 is None:
        return s1 is not s2
    if n == 0:
        return True
    return str_ncmp(s1, s2, n) == 0


def equals(s1: Optional[str], s2: Optional[str]) -> bool:
    """Equality that treats None as equal only to None."""
    if (s1 is None or s2 is None) and s1 is not s2:
        return False
    return str_cmp(s1, s2) == 0


def str_chr(text: Optional[str], c: Union[str, int]) -> Optional[int]:
    """Index of the first occurrence of c, or None."""
    if text is None:
        return None
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def str_rchr(text: Optional[str], c: Union[str, int]) -> Optional[int]:
    """Index of the last occurrence of c, or None."""
    if text is None:
        return None
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def str_str(big: Optional[str], little: Optional[str]) -> Optional[int]:
    """Index of the first occurrence of little in big, or None."""
    if big is None or little is None:
        return None
    index = big.find(little)
    return None if index < 0 else index


def str_nstr(big: Optional[str], little: str, n: int) -> Optional[int]:
    """Index of little in big, looking only within the first n characters."""
    if not little:
        return 0
    if big is None:
        return None
    little_len = len(little)
    for start in range(n + 1):
        i = 0
        while (
            _at(big, start + i) == _at(little, i)
            and _at(big, start + i) != NUL
            and start + (little_len - i) <= n
        ):
            i += 1
        if i == little_len:
            return start
        if _at(big, start + i) == NUL:
            return None
    return None