"""Source location tracking for Blossom diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A half-open ``[start, end)`` range of character offsets in a source."""

    file: str
    start: int
    end: int

    def line_column(self, source: str) -> tuple[int, int]:
        """Return the 1-indexed ``(line, column)`` of ``start`` in *source*."""
        prefix = source[: self.start]
        line = prefix.count("\n") + 1
        column = self.start - (prefix.rfind("\n") + 1) + 1
        return line, column

    def __str__(self) -> str:
        return f"{self.file}:{self.start}-{self.end}"
