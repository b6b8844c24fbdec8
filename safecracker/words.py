"""Splitting text into words and trimming whitespace."""

from __future__ import annotations

from itertools import groupby
from typing import Callable, Optional

from .chars import SPACE_CHARS


def _delim(delim: str) -> str:
    if len(delim) != 1:
        raise ValueError(f"expected a single delimiter character, got {delim!r}")
    return delim


def split(text: Optional[str], delim: str) -> Optional[list[str]]:
    """The non-empty words of text separated by delim; None for None."""
    if text is None:
        return None
    return [word for word in text.split(_delim(delim)) if word]


def num_words(text: Optional[str], delim: str) -> int:
    """Number of non-empty words of text separated by delim."""
    words = split(text, delim)
    return 0 if words is None else len(words)


def word_len(text: Optional[str], delim: str) -> int:
    """Length of the first word after any leading delimiters."""
    words = split(text, delim)
    return len(words[0]) if words else 0


def split_pattern(
    text: Optional[str], predicate: Callable[[str], bool]
) -> Optional[list[str]]:
    """Words of text separated by runs of characters for which predicate holds."""
    if text is None:
        return None
    return [
        "".join(group)
        for is_separator, group in groupby(text, key=lambda ch: bool(predicate(ch)))
        if not is_separator
    ]


def trim(text: Optional[str]) -> Optional[str]:
    """Text without leading and trailing ASCII whitespace."""
    if text is None:
        return None
    return text.strip(SPACE_CHARS)