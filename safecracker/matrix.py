"""Dense integer and floating-point matrices with a few arithmetic helpers."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

Number = Any


class MatrixError(ValueError):
    """A matrix operation was given operands it cannot work with."""


def _count(n: int, what: str) -> int:
    n = operator.index(n)
    if n < 0:
        raise MatrixError(f"{what} must be non-negative, got {n}")
    return n


def _check_kind(kind: type) -> type:
    if kind not in (int, float):
        raise MatrixError(f"matrix kind must be int or float, got {kind!r}")
    return kind


def _convert(value: Number, kind: type) -> Number:
    # float to int conversion truncates toward zero
    return int(value) if kind is int else float(value)


@dataclass
class Matrix:
    """A rows x cols matrix whose cells all hold values of one kind (int or float).

    When data is not given the matrix is filled with zeros.
    """

    rows: int
    cols: int
    kind: type = float
    data: list[list[Number]] = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        self.rows = _count(self.rows, "rows")
        self.cols = _count(self.cols, "cols")
        self.kind = _check_kind(self.kind)
        if self.data is None:
            zero = self.kind(0)
            self.data = [[zero] * self.cols for _ in range(self.rows)]
            return
        if len(self.data) != self.rows:
            raise MatrixError(f"expected {self.rows} rows, got {len(self.data)}")
        for index, row in enumerate(self.data):
            if len(row) != self.cols:
                raise MatrixError(
                    f"row {index} has {len(row)} columns, expected {self.cols}"
                )
        self.data = [[_convert(v, self.kind) for v in row] for row in self.data]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Number]], kind: type = float) -> "Matrix":
        """Build a matrix from a non-empty sequence of equally long rows."""
        data = [list(row) for row in rows]
        if not data:
            raise MatrixError("from_rows() needs at least one row")
        return cls(len(data), len(data[0]), kind, data)

    @property
    def shape(self) -> tuple[int, int]:
        """The pair (rows, cols)."""
        return self.rows, self.cols

    def column(self, col: int) -> list[Number]:
        """The values of one column, top to bottom."""
        return column(self.data, col)

    def scale(self, factor: float) -> "Matrix":
        """Multiply every cell by factor in place; integer cells are truncated."""
        self.data = [[_convert(v * factor, self.kind) for v in row] for row in self.data]
        return self

    def add_scalar(self, value: Number) -> "Matrix":
        """Add value to every cell in place.

        An integer matrix accepts only integer values.
        """
        if self.kind is int:
            value = operator.index(value)
        self.data = [[_convert(v + value, self.kind) for v in row] for row in self.data]
        return self

    def multiply(self, other: "Matrix") -> "Matrix":
        """The matrix product self x other as a new matrix.

        The result is an integer matrix when both operands are, else a float one.
        """
        if other is None:
            raise MatrixError("multiply() needs a matrix")
        if self.cols != other.rows:
            raise MatrixError("Matrix ineligible for multiplication (wid/len mismatch)")
        kind = int if self.kind is int and other.kind is int else float
        other_cols = [other.column(c) for c in range(other.cols)]
        data = [[dot_product(row, col) for col in other_cols] for row in self.data]
        return Matrix(self.rows, other.cols, kind, data)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        return self.multiply(other)


def make_matrix(rows: int, cols: int, kind: type = float) -> Matrix:
    """A new zero-filled matrix of the given size and kind."""
    return Matrix(rows, cols, kind)


def dot_product(a: Sequence[Number], b: Sequence[Number]) -> Number:
    """Sum of the pairwise products of two equally long sequences."""
    if a is None or b is None:
        raise MatrixError("dot_product() needs two sequences")
    if len(a) != len(b):
        raise MatrixError(f"sequences differ in length: {len(a)} and {len(b)}")
    return sum((x * y for x, y in zip(a, b)), 0)


def column(data: Optional[Sequence[Sequence[Number]]], col: int) -> list[Number]:
    """The col-th value of every row of data."""
    if data is None:
        raise MatrixError("column() needs rows of data")
    return [row[col] for row in data]