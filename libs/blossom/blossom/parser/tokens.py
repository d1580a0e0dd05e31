"""Token definitions for the Blossom lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from blossom.core.interner import Symbol


class TokenKind(Enum):
    """All token types recognized by the Blossom lexer."""

    # === Literals (carry a symbol) ===
    NUMBER = auto()
    TEXT = auto()
    IDENT = auto()
    UNKNOWN = auto()

    # Arithmetic
    PLUS = auto()  # +
    MINUS = auto()  # -
    MULTIPLY = auto()  # *
    DIVIDE = auto()  # /

    # Relational / equality
    LESS_THAN = auto()  # <
    GREATER_THAN = auto()  # >
    LESS_EQUAL = auto()  # <=
    GREATER_EQUAL = auto()  # >=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    NOT_EQUAL = auto()  # !=

    # Binding / paths
    COLON_EQUAL = auto()  # :=
    COLON_COLON = auto()  # ::
    ARROW = auto()  # ->
    COMMA = auto()  # ,
    DOT = auto()  # .

    # Word operators
    AND = auto()
    OR = auto()
    NOT = auto()

    # Delimiters
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    LBRACE = auto()  # {
    RBRACE = auto()  # }

    # Keywords
    IF = auto()
    ELSE = auto()
    FOR = auto()
    IN = auto()
    RETURN = auto()
    BREAK = auto()
    CONTINUE = auto()
    LOOP = auto()
    IMPORT = auto()
    EXTERNAL = auto()


# Kinds whose tokens carry an interned spelling.
LITERAL_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.NUMBER, TokenKind.TEXT, TokenKind.IDENT, TokenKind.UNKNOWN}
)

# Keyword string -> TokenKind mapping.
# Identifiers are checked against this table when they are emitted.
KEYWORDS: dict[str, TokenKind] = {
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "for": TokenKind.FOR,
    "in": TokenKind.IN,
    "import": TokenKind.IMPORT,
    "and": TokenKind.AND,
    "or": TokenKind.OR,
    "not": TokenKind.NOT,
    "return": TokenKind.RETURN,
    "break": TokenKind.BREAK,
    "continue": TokenKind.CONTINUE,
    "loop": TokenKind.LOOP,
    "external": TokenKind.EXTERNAL,
}

# Characters that start or continue an operator run.
OPERATOR_CHARS = frozenset("+-*/<>:=,.!")

# A complete operator run -> TokenKind. Runs not listed here become UNKNOWN.
OPERATORS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "=": TokenKind.EQUAL,
    "<=": TokenKind.LESS_EQUAL,
    ">=": TokenKind.GREATER_EQUAL,
    "==": TokenKind.EQUAL_EQUAL,
    "!=": TokenKind.NOT_EQUAL,
    ":=": TokenKind.COLON_EQUAL,
    "::": TokenKind.COLON_COLON,
    "->": TokenKind.ARROW,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
}

DELIMITERS: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}


@dataclass(frozen=True)
class Token:
    """A single token produced by the Blossom lexer.

    ``span`` is the half-open range of offsets the token covers. Offsets index
    the source ``str`` (code points), not its UTF-8 bytes, so
    ``source[start:end]`` recovers the spelling.
    ``symbol`` is set exactly when ``kind`` is one of ``LITERAL_KINDS``.
    """

    kind: TokenKind
    span: tuple[int, int]
    symbol: Symbol | None = None

    @property
    def start(self) -> int:
        return self.span[0]

    @property
    def end(self) -> int:
        return self.span[1]
