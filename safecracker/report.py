"""Rendering a solved safe as text."""

from __future__ import annotations

from .layer import HOLE, Safe


def _cell(value: int) -> str:
    # single-digit values, negative ones included, get a leading pad
    pad = " " if -9 <= value <= 9 else ""
    return f"{pad}{value}  "


def format_layer(safe: Safe, index: int) -> str:
    """One layer's visible values, holes filled from the next layer (0 if none)."""
    layer = safe.layers[index]
    below = safe.layers[index + 1] if index + 1 < len(safe.layers) else None
    cells = []
    for col in range(safe.columns):
        value = layer.inner_at(col)
        if value == HOLE:
            value = below.outer_at(col) if below is not None else 0
        cells.append(_cell(value))
    return "".join(cells)


def format_solution(safe: Safe) -> str:
    """Every layer's values, then every layer's rotation, then a blank line."""
    rows = "".join(format_layer(safe, i) + "\n" for i in range(len(safe.layers)))
    rotations = "".join(f"\nLayer rotation: {layer.rotation}" for layer in safe.layers)
    return rows + rotations + "\n\n"