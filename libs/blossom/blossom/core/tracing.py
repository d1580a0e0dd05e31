"""Optional observers notified as tokens and AST nodes are produced."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from blossom.parser.ast_nodes import AstNode
    from blossom.parser.tokens import Token

TRACE_LOGGER_NAME = "blossom.trace"


class Tracer(Protocol):
    """Hooks called by the lexer and parser at creation points."""

    def token_scanned(self, token: Token) -> None: ...

    def token_consumed(self, token: Token) -> None: ...

    def node_created(self, idx: int, node: AstNode) -> None: ...


class NullTracer:
    """Tracer that ignores every event. Used when none is injected."""

    def token_scanned(self, token: Token) -> None:
        pass

    def token_consumed(self, token: Token) -> None:
        pass

    def node_created(self, idx: int, node: AstNode) -> None:
        pass


class LoggingTracer:
    """Tracer that forwards every event to a ``logging`` logger at DEBUG."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or logging.getLogger(TRACE_LOGGER_NAME)

    def token_scanned(self, token: Token) -> None:
        self._log.debug("Scanned token %s at %s", token.kind.name, token.span)

    def token_consumed(self, token: Token) -> None:
        self._log.debug("Consuming token %s", token.kind.name)

    def node_created(self, idx: int, node: AstNode) -> None:
        self._log.debug("Saving AST node #%d: %s", idx, type(node.kind).__name__)
