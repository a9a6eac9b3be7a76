"""Cursor bookkeeping for the scanner."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Where the scanner is in its source text.

    All three counters are zero-based. ``offset`` counts characters from
    the start of the source; ``line`` counts newlines consumed so far and
    ``column`` counts characters consumed since the last newline.
    """

    offset: int = 0
    line: int = 0
    column: int = 0

    def advance(self, ch: str) -> Position:
        """Return the position after consuming ``ch``."""
        if ch == "\n":
            return Position(self.offset + 1, self.line + 1, 0)
        return Position(self.offset + 1, self.line, self.column + 1)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"
