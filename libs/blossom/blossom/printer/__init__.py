"""Blossom printer subpackage (Layer 3 -- depends on parser, core)."""

from blossom.printer.pretty import OPERATOR_SPELLINGS, Printer, render, to_sexpr

__all__ = ["OPERATOR_SPELLINGS", "Printer", "render", "to_sexpr"]
