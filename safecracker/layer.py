"""The rings of a safe and the safe built from them."""

from __future__ import annotations

from dataclasses import dataclass, field

HOLE = -1
"""Marks an inner cell through which the next layer's outer ring shows."""


@dataclass
class Layer:
    """One ring of the safe: an outer and an inner row of numbers."""

    outer: list[int]
    inner: list[int]
    rotation: int = 0

    def __post_init__(self) -> None:
        if len(self.outer) != len(self.inner):
            raise ValueError("outer and inner rows must have the same length")
        if not self.outer:
            raise ValueError("a layer needs at least one column")

    def outer_at(self, col: int) -> int:
        """The outer value visible at column col under the current rotation."""
        return self.outer[(self.rotation + col) % len(self.outer)]

    def inner_at(self, col: int) -> int:
        """The inner value visible at column col under the current rotation."""
        return self.inner[(self.rotation + col) % len(self.inner)]


@dataclass
class Safe:
    """A stack of layers; each layer's holes show the next layer's outer ring."""

    layers: list[Layer] = field(default_factory=list)
    columns: int = 0
    target: int = 0

    def __post_init__(self) -> None:
        for layer in self.layers:
            if len(layer.outer) != self.columns:
                raise ValueError(
                    f"layer has {len(layer.outer)} columns, safe has {self.columns}"
                )

    def offsets(self) -> tuple[int, ...]:
        """The rotation of every layer, in layer order."""
        return tuple(layer.rotation for layer in self.layers)