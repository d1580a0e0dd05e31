"""Blossom core subpackage (Layer 0 — no runtime imports from other subpackages)."""

from blossom.core.interner import Interner, Symbol
from blossom.core.tracing import LoggingTracer, NullTracer, Tracer

__all__ = [
    "Interner",
    "Symbol",
    "Tracer",
    "NullTracer",
    "LoggingTracer",
]
