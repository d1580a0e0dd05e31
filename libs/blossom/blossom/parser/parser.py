"""Recursive-descent parser for Blossom source code.

Handles:
- Numbers and identifiers
- ``if cond then [else alt]``
- ``{ expr* }`` blocks
- ``return expr``
- Binary operators via precedence climbing

Anything else in atom position becomes an ``Error`` node and parsing goes on,
so a single pass can surface several independent problems.
"""

from __future__ import annotations

from blossom.core.interner import Interner
from blossom.core.tracing import NullTracer, Tracer
from blossom.diagnostics.collector import DiagnosticCollector
from blossom.diagnostics.location import SourceLocation
from blossom.parser.ast_nodes import (
    Arena,
    AstIdx,
    AstKind,
    AstNode,
    BinaryOp,
    Block,
    Error,
    Identifier,
    If,
    Module,
    Number,
    Return,
)
from blossom.parser.lexer import scan
from blossom.parser.tokens import Token, TokenKind

# Binding power of each binary operator; higher binds tighter.
# Tokens missing from this table end an operator chain.
PRECEDENCE: dict[TokenKind, int] = {
    TokenKind.COLON_EQUAL: 1,
    TokenKind.EQUAL: 1,
    TokenKind.PLUS: 10,
    TokenKind.MINUS: 10,
    TokenKind.MULTIPLY: 20,
    TokenKind.DIVIDE: 20,
    TokenKind.LESS_THAN: 30,
    TokenKind.GREATER_THAN: 30,
    TokenKind.LESS_EQUAL: 30,
    TokenKind.GREATER_EQUAL: 30,
    TokenKind.EQUAL_EQUAL: 40,
    TokenKind.NOT_EQUAL: 40,
    TokenKind.DOT: 50,
    TokenKind.ARROW: 50,
    TokenKind.COLON_COLON: 60,
}


class Parser:
    """Recursive-descent, precedence-climbing parser for Blossom modules.

    The cursor only moves forward and every token is looked at once. Nodes
    are appended to an ``Arena`` after their children, which keeps child
    indices below parent indices.
    """

    def __init__(
        self,
        tokens: list[Token],
        diagnostics: DiagnosticCollector | None = None,
        tracer: Tracer | None = None,
        filename: str = "<string>",
    ) -> None:
        self._tokens = tokens
        self._diag = diagnostics if diagnostics is not None else DiagnosticCollector()
        self._tracer = tracer or NullTracer()
        self._filename = filename
        self._arena = Arena()
        self._pos = 0

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------

    def _peek(self) -> Token | None:
        """Return the current token without consuming it, or None at the end."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _check(self, kind: TokenKind) -> bool:
        """Return True if the current token is *kind*."""
        tok = self._peek()
        return tok is not None and tok.kind == kind

    def _advance(self) -> Token:
        """Consume and return the current token."""
        tok = self._tokens[self._pos]
        self._pos += 1
        self._tracer.token_consumed(tok)
        return tok

    def _loc(self, tok: Token) -> SourceLocation:
        return SourceLocation(file=self._filename, start=tok.start, end=tok.end)

    def _eof_loc(self) -> SourceLocation | None:
        if not self._tokens:
            return None
        end = self._tokens[-1].end
        return SourceLocation(file=self._filename, start=end, end=end)

    # ------------------------------------------------------------------
    # Arena helpers
    # ------------------------------------------------------------------

    def _save(self, kind: AstKind, span: tuple[int, int]) -> AstIdx:
        node = AstNode(kind, span)
        idx = self._arena.push(node)
        self._tracer.node_created(idx, node)
        return idx

    def _save_atom(self, kind: AstKind) -> AstIdx:
        # Atom spans are (cursor, cursor + 1) taken once the atom is complete,
        # so for multi-token atoms they point past the atom's last token.
        return self._save(kind, (self._pos, self._pos + 1))

    # ------------------------------------------------------------------
    # Top level
    # ------------------------------------------------------------------

    def parse_program(self) -> Module:
        """Parse expressions until the tokens run out."""
        definitions: list[AstIdx] = []
        while not self._at_end():
            definitions.append(self.parse_expression(0))
        return Module(definitions=tuple(definitions), arena=self._arena)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def parse_expression(self, min_precedence: int = 0) -> AstIdx:
        """Parse one atom, then any operators binding at least *min_precedence*."""
        lhs = self.parse_atom()
        return self.parse_binary_op(lhs, min_precedence)

    def parse_atom(self) -> AstIdx:
        """Parse a single atom; always consumes a token unless input is exhausted."""
        if self._at_end():
            self._diag.error("Unexpected end of input, expected expression", self._eof_loc())
            return self._save_atom(Error())

        tok = self._advance()
        kind = tok.kind

        if kind == TokenKind.NUMBER:
            return self._save_atom(Number(value=tok.symbol))

        if kind == TokenKind.IDENT:
            return self._save_atom(Identifier(name=tok.symbol))

        if kind == TokenKind.IF:
            cond = self.parse_expression(0)
            if_branch = self.parse_expression(0)
            else_branch: AstIdx | None = None
            if self._check(TokenKind.ELSE):
                self._advance()  # consume 'else'
                else_branch = self.parse_expression(0)
            return self._save_atom(If(cond=cond, if_branch=if_branch, else_branch=else_branch))

        if kind == TokenKind.LBRACE:
            return self._parse_block(tok)

        if kind == TokenKind.RETURN:
            expr = self.parse_expression(0)
            return self._save_atom(Return(expr=expr))

        self._diag.error(f"Expected expression, got {kind.name}", self._loc(tok))
        return self._save_atom(Error())

    def _parse_block(self, open_tok: Token) -> AstIdx:
        """Parse statements after ``{`` up to and including ``}``."""
        statements: list[AstIdx] = []
        while not self._at_end() and not self._check(TokenKind.RBRACE):
            statements.append(self.parse_expression(0))
        if self._at_end():
            self._diag.error("Unterminated block, expected '}'", self._loc(open_tok))
        else:
            self._advance()  # consume '}'
        return self._save_atom(Block(statements=tuple(statements)))

    def parse_binary_op(self, lhs: AstIdx, min_precedence: int) -> AstIdx:
        """Fold operators into *lhs* while they bind at least *min_precedence*.

        The right operand of each operator is a single atom, so chains group
        strictly left to right regardless of the operators' precedence.
        """
        while True:
            tok = self._peek()
            if tok is None:
                break
            op_precedence = PRECEDENCE.get(tok.kind)
            if op_precedence is None or op_precedence < min_precedence:
                break

            op = self._advance().kind
            rhs = self.parse_atom()
            span = (self._arena[lhs].span[0], self._arena[rhs].span[1])
            lhs = self._save(BinaryOp(lhs=lhs, rhs=rhs, op=op), span)
        return lhs


# ------------------------------------------------------------------
# Convenience functions
# ------------------------------------------------------------------


def parse(
    tokens: list[Token],
    diagnostics: DiagnosticCollector | None = None,
    tracer: Tracer | None = None,
) -> Module:
    """Parse a token list produced by ``scan`` into a ``Module``."""
    return Parser(tokens, diagnostics, tracer).parse_program()


def parse_source(
    source: str,
    filename: str = "<string>",
    tracer: Tracer | None = None,
) -> tuple[Module, Interner, DiagnosticCollector]:
    """Scan and parse Blossom source code.

    Returns:
        A ``(module, interner, diagnostics)`` tuple.
    """
    diag = DiagnosticCollector()
    tokens, interner = scan(source, filename, diag, tracer)
    module = Parser(tokens, diag, tracer, filename).parse_program()
    return module, interner, diag
