"""
Position / Range — 0-based coordinates inside a schema document.

Ranges are half-open on the column axis the way editors treat them:
``Range(Position(3, 0), Position(3, 1))`` covers the first character
of line 3.  An empty range (``start == end``) is an insertion point.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A (line, column) pair.  Ordered lexicographically."""
    line: int = 0
    column: int = 0

    def __post_init__(self):
        if self.line < 0 or self.column < 0:
            raise ValueError(
                f"Position must be non-negative, got ({self.line}, {self.column})"
            )


@dataclass(frozen=True, slots=True)
class Range:
    """An ordered pair of positions with ``start <= end``."""
    start: Position
    end: Position

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    @classmethod
    def on_line(cls, line: int, start_col: int, end_col: int) -> Range:
        """Build a single-line range."""
        return cls(Position(line, start_col), Position(line, end_col))

    @classmethod
    def point(cls, line: int, column: int) -> Range:
        """Empty range used as an insertion point."""
        pos = Position(line, column)
        return cls(pos, pos)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end
