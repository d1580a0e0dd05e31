"""Diagnostic severity levels for Blossom."""

from __future__ import annotations

import logging
from enum import Enum


class DiagnosticSeverity(Enum):
    """Severity level of a diagnostic message, most severe first."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def logging_level(self) -> int:
        """The ``logging`` level used when this severity is reported to a logger."""
        return _LOGGING_LEVELS[self]

    def __str__(self) -> str:
        return self.value


_LOGGING_LEVELS: dict[DiagnosticSeverity, int] = {
    DiagnosticSeverity.ERROR: logging.ERROR,
    DiagnosticSeverity.WARNING: logging.WARNING,
    DiagnosticSeverity.INFO: logging.INFO,
}
