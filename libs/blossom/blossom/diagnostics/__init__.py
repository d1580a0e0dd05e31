"""Blossom diagnostics subpackage (Layer 0 — zero internal dependencies)."""

from blossom.diagnostics.collector import DiagnosticCollector
from blossom.diagnostics.diagnostic import Diagnostic
from blossom.diagnostics.location import SourceLocation
from blossom.diagnostics.severity import DiagnosticSeverity

__all__ = ["SourceLocation", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
