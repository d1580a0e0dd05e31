"""Render a parsed ``Module`` back to Blossom-like source text."""

from __future__ import annotations

from blossom.core.interner import Interner, Symbol
from blossom.parser.ast_nodes import (
    AstIdx,
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
)
from blossom.parser.tokens import KEYWORDS, OPERATORS, TokenKind

# Operator token kind -> source spelling.
OPERATOR_SPELLINGS: dict[TokenKind, str] = {kind: text for text, kind in OPERATORS.items()}
OPERATOR_SPELLINGS.update({KEYWORDS[word]: word for word in ("and", "or", "not")})

_WORD_OPERATORS = frozenset({TokenKind.AND, TokenKind.OR, TokenKind.NOT})


class Printer:
    """Read-only walk over a module that accumulates text in a buffer."""

    def __init__(self, module: Module, interner: Interner, indent: int = 2) -> None:
        self._module = module
        self._interner = interner
        self._step = indent
        self._buffer: list[str] = []

    def _write(self, text: str) -> None:
        self._buffer.append(text)

    def _op(self, op: TokenKind) -> str:
        try:
            return OPERATOR_SPELLINGS[op]
        except KeyError:
            raise ValueError(f"{op.name} is not an operator") from None

    def _symbol(self, symbol: Symbol, missing: str) -> str:
        text = self._interner.resolve(symbol)
        return missing if text is None else text

    def _print_list(self, items: tuple[AstIdx, ...], depth: int) -> None:
        for i, item in enumerate(items):
            if i > 0:
                self._write(", ")
            self.print_node(item, depth)

    def print_node(self, idx: AstIdx, depth: int = 0) -> None:
        """Append the text for node *idx*; *depth* is the current indentation."""
        kind = self._module.get(idx).kind
        if isinstance(kind, Number):
            self._write(self._symbol(kind.value, "<Unknown number>"))
        elif isinstance(kind, Identifier):
            self._write(self._symbol(kind.name, "<Unknown identifier>"))
        elif isinstance(kind, BinaryOp):
            self.print_node(kind.lhs, depth)
            self._write(f" {self._op(kind.op)} ")
            self.print_node(kind.rhs, depth)
        elif isinstance(kind, UnaryOp):
            self._write(self._op(kind.op))
            if kind.op in _WORD_OPERATORS:
                self._write(" ")
            self.print_node(kind.expr, depth)
        elif isinstance(kind, Call):
            self.print_node(kind.callee, depth)
            self._write("(")
            self._print_list(kind.args, depth)
            self._write(")")
        elif isinstance(kind, Function):
            self._write("(")
            self._print_list(kind.params, depth)
            self._write(") -> ")
            self.print_node(kind.result, depth)
            self._write(" ")
            self.print_node(kind.body, depth)
        elif isinstance(kind, Block):
            if not kind.statements:
                self._write("{}")
                return
            self._write("{\n")
            for statement in kind.statements:
                self._write(" " * (depth + self._step))
                self.print_node(statement, depth + self._step)
                self._write("\n")
            self._write(" " * depth + "}")
        elif isinstance(kind, If):
            self._write("if ")
            self.print_node(kind.cond, depth)
            self._write(" ")
            self.print_node(kind.if_branch, depth)
            if kind.else_branch is not None:
                self._write(" else ")
                self.print_node(kind.else_branch, depth)
        elif isinstance(kind, Loop):
            self._write("loop ")
            self.print_node(kind.body, depth)
        elif isinstance(kind, Import):
            self._write("import")
        elif isinstance(kind, Return):
            self._write("return ")
            self.print_node(kind.expr, depth)
        elif isinstance(kind, Error):
            self._write("<Error>")
        else:
            raise TypeError(f"Unknown AST node kind: {type(kind).__name__}")

    def render(self) -> str:
        """Render every top-level definition, one per line."""
        for idx in self._module.definitions:
            self.print_node(idx, 0)
            self._write("\n")
        return "".join(self._buffer)


def render(module: Module, interner: Interner, indent: int = 2) -> str:
    """Render *module* to text, resolving symbols through *interner*."""
    return Printer(module, interner, indent).render()


def to_sexpr(module: Module, interner: Interner, idx: AstIdx | None = None) -> tuple:
    """Return node *idx* (or every definition) as nested tuples, spans dropped.

    Symbols are resolved to text, so trees from different interners compare
    equal when they have the same shape and spellings.
    """
    if idx is None:
        return tuple(to_sexpr(module, interner, d) for d in module.definitions)

    kind = module.get(idx).kind

    def sub(child: AstIdx) -> tuple:
        return to_sexpr(module, interner, child)

    if isinstance(kind, Number):
        return ("Number", interner.resolve(kind.value))
    elif isinstance(kind, Identifier):
        return ("Identifier", interner.resolve(kind.name))
    elif isinstance(kind, BinaryOp):
        return ("BinaryOp", OPERATOR_SPELLINGS.get(kind.op, kind.op.name), sub(kind.lhs), sub(kind.rhs))
    elif isinstance(kind, UnaryOp):
        return ("UnaryOp", OPERATOR_SPELLINGS.get(kind.op, kind.op.name), sub(kind.expr))
    elif isinstance(kind, If):
        if kind.else_branch is None:
            return ("If", sub(kind.cond), sub(kind.if_branch))
        return ("If", sub(kind.cond), sub(kind.if_branch), sub(kind.else_branch))
    elif isinstance(kind, Loop):
        return ("Loop", sub(kind.body))
    elif isinstance(kind, Call):
        return ("Call", sub(kind.callee), *(sub(a) for a in kind.args))
    elif isinstance(kind, Function):
        return ("Function", tuple(sub(p) for p in kind.params), sub(kind.result), sub(kind.body))
    elif isinstance(kind, Block):
        return ("Block", *(sub(s) for s in kind.statements))
    elif isinstance(kind, Import):
        return ("Import",)
    elif isinstance(kind, Return):
        return ("Return", sub(kind.expr))
    elif isinstance(kind, Error):
        return ("Error",)
    else:
        raise TypeError(f"Unknown AST node kind: {type(kind).__name__}")
