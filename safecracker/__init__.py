"""Brute-force solver for rotating-ring safe puzzles, with small text, buffer and matrix helpers."""

__version__ = "0.1.0"