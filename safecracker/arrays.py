"""Helpers for lists of numbers."""

from __future__ import annotations

from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")


def bubble_sort(values: MutableSequence[T]) -> None:
    """Sort values in place into ascending order; equal items keep their order."""
    values[:] = sorted(values)


def find_biggest(values: Sequence[T]) -> T:
    """The largest of values; raises ValueError when there are none."""
    if not values:
        raise ValueError("find_biggest() needs at least one value")
    return max(values)