"""Diagnostic collector for accumulating messages during scanning and parsing."""

from __future__ import annotations

from blossom.diagnostics.diagnostic import Diagnostic
from blossom.diagnostics.location import SourceLocation
from blossom.diagnostics.severity import DiagnosticSeverity


class DiagnosticCollector:
    """Accumulates diagnostics while the lexer and parser run.

    Neither pass raises on bad input; everything they notice lands here so the
    caller can decide what to do with it.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def error(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record an error diagnostic."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.ERROR, message, location, notes))

    def warning(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record a warning diagnostic."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.WARNING, message, location, notes))

    def info(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record an informational diagnostic."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.INFO, message, location, notes))

    def has_errors(self) -> bool:
        """Return True if any error diagnostics have been recorded."""
        return any(d.severity == DiagnosticSeverity.ERROR for d in self._diagnostics)

    def count(self, severity: DiagnosticSeverity) -> int:
        """Return how many diagnostics of *severity* have been recorded."""
        return sum(1 for d in self._diagnostics if d.severity == severity)

    def worst(self) -> DiagnosticSeverity | None:
        """Return the most severe level recorded, or None if nothing was."""
        for severity in DiagnosticSeverity:
            if self.count(severity):
                return severity
        return None

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def format_all(self) -> str:
        """Format all diagnostics as a newline-separated string."""
        return "\n".join(str(d) for d in self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)
