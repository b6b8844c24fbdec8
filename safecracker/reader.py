"""Loading a safe description from text.

The format is three header lines (target, number of layers, number of
columns), then for each layer an ignored separator line, the outer row and
the inner row. Each row holds one number per three characters. Layers are
stacked so that the last one in the text comes first in the safe.
"""

from __future__ import annotations

import os
from typing import Iterable

from .layer import Layer, Safe
from .lines import iter_lines
from .numbers import parse_int

FIELD_WIDTH = 3


class SafeFileError(ValueError):
    """The safe description is malformed at a given line (counted from 1)."""

    def __init__(self, source: str, line_number: int) -> None:
        self.source = source
        self.line_number = line_number
        super().__init__(
            f"Bad file: {source}\n"
            f"At line number: {line_number} (first line in the file is 1)"
        )


def parse_row(line: str, columns: int) -> list[int]:
    """Read one number from each three-character field of a row."""
    if len(line) < FIELD_WIDTH * columns:
        raise ValueError(
            f"row needs {FIELD_WIDTH * columns} characters, has {len(line)}"
        )
    return [parse_int(line[FIELD_WIDTH * col:]) for col in range(columns)]


def parse_safe(lines: Iterable[str], source: str = "<input>") -> Safe:
    """Build a safe from the lines of a description."""
    it = iter(lines)
    line_number = 0

    def next_line() -> str:
        nonlocal line_number
        line_number += 1
        try:
            return next(it)
        except StopIteration:
            raise SafeFileError(source, line_number) from None

    def header(minimum: int | None = None) -> int:
        value = parse_int(next_line())
        if minimum is not None and value < minimum:
            raise SafeFileError(source, line_number)
        return value

    def row(columns: int) -> list[int]:
        text = next_line()
        try:
            return parse_row(text, columns)
        except ValueError:
            raise SafeFileError(source, line_number) from None

    target = header()
    count = header(minimum=1)
    columns = header(minimum=1)

    layers: list[Layer] = []
    for _ in range(count):
        next_line()
        outer = row(columns)
        inner = row(columns)
        layers.insert(0, Layer(outer, inner))
    return Safe(layers, columns=columns, target=target)


def read_safe(path: str | os.PathLike[str]) -> Safe:
    """Read a safe description from a file."""
    with open(path, encoding="utf-8") as handle:
        return parse_safe(iter_lines(handle), os.fspath(path))