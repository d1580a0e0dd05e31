"""Blossom language front end: lexer, arena-backed parser and printer."""

from blossom.core import Interner, Symbol
from blossom.parser import Module, Token, TokenKind, parse, parse_source, scan
from blossom.printer import render

__version__ = "0.1.0"

__all__ = [
    "Interner",
    "Symbol",
    "Token",
    "TokenKind",
    "Module",
    "scan",
    "parse",
    "parse_source",
    "render",
]
