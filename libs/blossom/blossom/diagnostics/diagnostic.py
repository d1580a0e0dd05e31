"""Diagnostic message representation for Blossom."""

from __future__ import annotations

from dataclasses import dataclass

from blossom.diagnostics.location import SourceLocation
from blossom.diagnostics.severity import DiagnosticSeverity


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message attached to a range of the source."""

    severity: DiagnosticSeverity
    message: str
    location: SourceLocation | None = None
    notes: tuple[str, ...] = ()

    def render(self, source: str | None = None) -> str:
        """Format the diagnostic for a terminal.

        With *source* and a location, the offending line is quoted and the
        range underlined with carets. Notes follow on their own lines.
        """
        lines = [str(self)]
        if source is not None and self.location is not None:
            line, column = self.location.line_column(source)
            line_start = self.location.start - (column - 1)
            line_end = source.find("\n", line_start)
            if line_end == -1:
                line_end = len(source)
            width = max(1, min(self.location.end, line_end) - self.location.start)
            lines[0] += f" (line {line}, column {column})"
            lines.append("  " + source[line_start:line_end])
            lines.append("  " + " " * (column - 1) + "^" * width)
        lines.extend(f"  note: {note}" for note in self.notes)
        return "\n".join(lines)

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        return f"{loc}{self.severity}: {self.message}"
