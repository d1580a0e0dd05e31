"""Lexer (tokenizer) for Blossom source code."""

from __future__ import annotations

from enum import Enum, auto

from blossom.core.interner import Interner
from blossom.core.tracing import NullTracer, Tracer
from blossom.diagnostics.collector import DiagnosticCollector
from blossom.diagnostics.location import SourceLocation
from blossom.parser.tokens import DELIMITERS, KEYWORDS, OPERATOR_CHARS, OPERATORS, Token, TokenKind


class LexState(Enum):
    """States of the scanning automaton."""

    START = auto()
    IN_NUMBER = auto()
    IN_DECIMAL = auto()
    IN_IDENTIFIER = auto()
    IN_OPERATOR = auto()
    IN_TEXT = auto()
    IN_DELIMITER = auto()
    IN_COMMENT = auto()
    IN_UNKNOWN = auto()
    EOF = auto()


def _is_unknown_char(ch: str) -> bool:
    """True if *ch* cannot start any other kind of token."""
    return not (
        ch.isalnum()
        or ch.isspace()
        or ch == "_"
        or ch in OPERATOR_CHARS
        or ch in DELIMITERS
        or ch in ('"', ";")
    )


class Lexer:
    """Tokenize Blossom source into a flat token stream.

    A single left-to-right pass driven by ``LexState``. Each step looks at the
    next character only: it either consumes it into the pending token or emits
    the pending token and returns to ``START`` without consuming, so the same
    character is examined again from there. Nothing is ever raised; input that
    fits no rule becomes an ``UNKNOWN`` token.
    """

    def __init__(
        self,
        source: str,
        filename: str = "<string>",
        diagnostics: DiagnosticCollector | None = None,
        tracer: Tracer | None = None,
    ) -> None:
        self._source = source
        self._filename = filename
        self._diag = diagnostics if diagnostics is not None else DiagnosticCollector()
        self._tracer = tracer or NullTracer()
        self._interner = Interner()
        self._tokens: list[Token] = []
        self._state = LexState.START
        self._pos = 0
        self._start = 0  # offset where the pending token began

    @property
    def interner(self) -> Interner:
        return self._interner

    @property
    def state(self) -> LexState:
        return self._state

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the character at the current position, or '' at EOF."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> None:
        self._pos += 1

    def _begin(self, state: LexState) -> None:
        """Start a new pending token in *state* at the current position."""
        self._state = state
        self._start = self._pos

    def _lexeme(self) -> str:
        return self._source[self._start : self._pos]

    def _loc(self) -> SourceLocation:
        return SourceLocation(file=self._filename, start=self._start, end=self._pos)

    def _emit(self, kind: TokenKind, text: str | None = None) -> None:
        """Append a token covering the pending range and return to START."""
        symbol = self._interner.intern(text) if text is not None else None
        token = Token(kind, (self._start, self._pos), symbol)
        self._tokens.append(token)
        self._tracer.token_scanned(token)
        self._state = LexState.START

    def _emit_unknown(self) -> None:
        text = self._lexeme()
        self._diag.warning(f"Unrecognized input {text!r}", self._loc())
        self._emit(TokenKind.UNKNOWN, text)

    # ------------------------------------------------------------------
    # Emitters
    # ------------------------------------------------------------------

    def _emit_number(self) -> None:
        self._emit(TokenKind.NUMBER, self._lexeme())

    def _emit_word(self) -> None:
        text = self._lexeme()
        kind = KEYWORDS.get(text)
        if kind is None:
            self._emit(TokenKind.IDENT, text)
        else:
            self._emit(kind)

    def _emit_operator(self) -> None:
        kind = OPERATORS.get(self._lexeme())
        if kind is None:
            self._emit_unknown()
        else:
            self._emit(kind)

    def _emit_text(self, closed: bool) -> None:
        # Content excludes the opening quote and, when present, the closing one.
        end = self._pos - 1 if closed else self._pos
        self._emit(TokenKind.TEXT, self._source[self._start + 1 : end])

    # ------------------------------------------------------------------
    # State steps
    # ------------------------------------------------------------------

    def _step_start(self, ch: str) -> None:
        if ch.isspace():
            self._advance()
        elif ch.isalpha() or ch == "_":
            self._begin(LexState.IN_IDENTIFIER)
            self._advance()
        elif ch.isdigit():
            self._begin(LexState.IN_NUMBER)
            self._advance()
        elif ch in OPERATOR_CHARS:
            self._begin(LexState.IN_OPERATOR)
            self._advance()
        elif ch in DELIMITERS:
            self._begin(LexState.IN_DELIMITER)
            self._advance()
            self._emit(DELIMITERS[ch])
        elif ch == '"':
            self._begin(LexState.IN_TEXT)
            self._advance()  # consume opening '"'
        elif ch == ";":
            self._begin(LexState.IN_COMMENT)
            self._advance()
        else:
            self._begin(LexState.IN_UNKNOWN)
            self._advance()

    def _step_number(self, ch: str) -> None:
        if ch.isdigit():
            self._advance()
        elif ch == ".":
            self._advance()
            self._state = LexState.IN_DECIMAL
        else:
            self._emit_number()

    def _step_decimal(self, ch: str) -> None:
        if ch.isdigit():
            self._advance()
        else:
            self._emit_number()

    def _step_identifier(self, ch: str) -> None:
        if ch.isalnum() or ch == "_":
            self._advance()
        else:
            self._emit_word()

    def _step_operator(self, ch: str) -> None:
        if ch in OPERATOR_CHARS:
            self._advance()
        else:
            self._emit_operator()

    def _step_text(self, ch: str) -> None:
        self._advance()
        if ch == '"':
            self._emit_text(closed=True)

    def _step_comment(self, ch: str) -> None:
        self._advance()
        if ch == "\n":
            self._state = LexState.START

    def _step_unknown(self, ch: str) -> None:
        if _is_unknown_char(ch):
            self._advance()
        else:
            self._emit_unknown()

    def _flush(self) -> None:
        """Emit whatever token is pending at end of input."""
        state = self._state
        if state in (LexState.IN_NUMBER, LexState.IN_DECIMAL):
            self._emit_number()
        elif state == LexState.IN_IDENTIFIER:
            self._emit_word()
        elif state == LexState.IN_OPERATOR:
            self._emit_operator()
        elif state == LexState.IN_TEXT:
            self._diag.warning("Unterminated text literal", self._loc())
            self._emit_text(closed=False)
        elif state == LexState.IN_UNKNOWN:
            self._emit_unknown()
        # START and IN_COMMENT have nothing pending.

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source and return the tokens in order."""
        steps = {
            LexState.START: self._step_start,
            LexState.IN_NUMBER: self._step_number,
            LexState.IN_DECIMAL: self._step_decimal,
            LexState.IN_IDENTIFIER: self._step_identifier,
            LexState.IN_OPERATOR: self._step_operator,
            LexState.IN_TEXT: self._step_text,
            LexState.IN_COMMENT: self._step_comment,
            LexState.IN_UNKNOWN: self._step_unknown,
        }
        while self._state != LexState.EOF:
            ch = self._peek()
            if not ch:
                self._flush()
                self._state = LexState.EOF
                break
            steps[self._state](ch)
        return list(self._tokens)


# ------------------------------------------------------------------
# Convenience function
# ------------------------------------------------------------------


def scan(
    source: str,
    filename: str = "<string>",
    diagnostics: DiagnosticCollector | None = None,
    tracer: Tracer | None = None,
) -> tuple[list[Token], Interner]:
    """Scan Blossom source code.

    Returns:
        A ``(tokens, interner)`` tuple. Every literal token's symbol resolves
        against the returned interner.
    """
    lexer = Lexer(source, filename, diagnostics, tracer)
    tokens = lexer.tokenize()
    return tokens, lexer.interner
