"""Blossom parser subpackage (Layer 2 -- depends on core, diagnostics)."""

from blossom.parser.ast_nodes import (
    Arena,
    AstIdx,
    AstKind,
    AstNode,
    BinaryOp,
    Block,
    Call,
    Error,
    Function,
    Identifier,
    If,
    Import,
    Loop,
    Module,
    Number,
    Return,
    UnaryOp,
    children,
    parent_map,
)
from blossom.parser.lexer import Lexer, LexState, scan
from blossom.parser.parser import PRECEDENCE, Parser, parse, parse_source
from blossom.parser.tokens import Token, TokenKind

__all__ = [
    "TokenKind",
    "Token",
    "LexState",
    "Lexer",
    "scan",
    "AstIdx",
    "AstKind",
    "AstNode",
    "Arena",
    "Module",
    "Number",
    "Identifier",
    "BinaryOp",
    "UnaryOp",
    "If",
    "Loop",
    "Call",
    "Function",
    "Block",
    "Import",
    "Return",
    "Error",
    "children",
    "parent_map",
    "PRECEDENCE",
    "Parser",
    "parse",
    "parse_source",
]
