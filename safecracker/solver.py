"""Searching every rotation of a safe for the ones that open it."""

from __future__ import annotations

from typing import Iterator

from .layer import HOLE, Safe


def sum_column(safe: Safe, col: int) -> int:
    """Sum of the values visible in one column.

    A hole in a layer's inner row shows the next layer's outer value instead;
    a hole in the last layer counts as its own value.
    """
    layers = safe.layers
    total = 0
    for layer, below in zip(layers, [*layers[1:], None]):
        value = layer.inner_at(col)
        if value == HOLE and below is not None:
            value = below.outer_at(col)
        total += value
    return total


def rotate(safe: Safe) -> bool:
    """Step to the next rotation, odometer style.

    Returns False once every layer has wrapped back to rotation 0.
    """
    for layer in safe.layers:
        layer.rotation += 1
        if layer.rotation < safe.columns:
            return True
        layer.rotation = 0
    return False


def is_solved(safe: Safe) -> bool:
    """True when every column sums to the safe's target."""
    return all(sum_column(safe, col) == safe.target for col in range(safe.columns))


def crack(safe: Safe) -> bool:
    """Rotate from the current position until solved.

    Returns True with the safe left in the solved position, or False once the
    rotations have wrapped around without a solution.
    """
    while True:
        if is_solved(safe):
            return True
        if not rotate(safe):
            return False


def iter_solutions(safe: Safe) -> Iterator[Safe]:
    """Yield the safe in each solved position, starting from the current one.

    The same safe object is yielded each time; read its state before asking
    for the next solution.
    """
    while True:
        if is_solved(safe):
            yield safe
        if not rotate(safe):
            return