"""AST node types and the arena that stores them.

Nodes never hold references to other nodes. Children are integer indices
into an ``Arena``, and every index a node mentions is smaller than the node's
own index, so the arena is a topologically sorted forest and cannot contain
cycles.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from blossom.core.interner import Symbol
from blossom.parser.tokens import TokenKind

# Index of a node inside an ``Arena``.
AstIdx = int
# Index of a token inside the parser's token list.
TokenIdx = int

__all__ = [
    "AstIdx",
    "TokenIdx",
    # Node kinds
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
    "AstKind",
    # Containers
    "AstNode",
    "Arena",
    "Module",
    "children",
    "parent_map",
]


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Number:
    """Numeric literal, kept as its interned spelling (``1``, ``3.25``)."""

    value: Symbol


@dataclass(frozen=True)
class Identifier:
    name: Symbol


@dataclass(frozen=True)
class Import:
    """Bare ``import`` marker."""


@dataclass(frozen=True)
class Error:
    """Placeholder for a token that could not start an expression."""


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BinaryOp:
    """``lhs op rhs``; *op* is the operator's token kind."""

    lhs: AstIdx
    rhs: AstIdx
    op: TokenKind


@dataclass(frozen=True)
class UnaryOp:
    expr: AstIdx
    op: TokenKind


# ---------------------------------------------------------------------------
# Control flow and structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class If:
    cond: AstIdx
    if_branch: AstIdx
    else_branch: AstIdx | None = None


@dataclass(frozen=True)
class Loop:
    body: AstIdx


@dataclass(frozen=True)
class Call:
    callee: AstIdx
    args: tuple[AstIdx, ...] = ()


@dataclass(frozen=True)
class Function:
    """``(params) -> result body``."""

    params: tuple[AstIdx, ...]
    result: AstIdx
    body: AstIdx


@dataclass(frozen=True)
class Block:
    """``{ statements }``; an empty block has no statements."""

    statements: tuple[AstIdx, ...] = ()


@dataclass(frozen=True)
class Return:
    expr: AstIdx


# Closed union of every node kind. Consumers handle each member explicitly.
AstKind = Union[
    Number,
    Identifier,
    BinaryOp,
    UnaryOp,
    If,
    Loop,
    Call,
    Function,
    Block,
    Import,
    Return,
    Error,
]


def children(kind: AstKind) -> tuple[AstIdx, ...]:
    """Return the arena indices *kind* refers to, in source order."""
    if isinstance(kind, (Number, Identifier, Import, Error)):
        return ()
    elif isinstance(kind, BinaryOp):
        return (kind.lhs, kind.rhs)
    elif isinstance(kind, UnaryOp):
        return (kind.expr,)
    elif isinstance(kind, If):
        if kind.else_branch is None:
            return (kind.cond, kind.if_branch)
        return (kind.cond, kind.if_branch, kind.else_branch)
    elif isinstance(kind, Loop):
        return (kind.body,)
    elif isinstance(kind, Call):
        return (kind.callee, *kind.args)
    elif isinstance(kind, Function):
        return (*kind.params, kind.result, kind.body)
    elif isinstance(kind, Block):
        return kind.statements
    elif isinstance(kind, Return):
        return (kind.expr,)
    else:
        raise TypeError(f"Unknown AST node kind: {type(kind).__name__}")


# ---------------------------------------------------------------------------
# Arena
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AstNode:
    """A node kind plus the ``(start, end)`` token span it was built from."""

    kind: AstKind
    span: tuple[TokenIdx, TokenIdx]


class Arena:
    """Append-only store of ``AstNode`` addressed by ``AstIdx``."""

    def __init__(self) -> None:
        self._nodes: list[AstNode] = []

    def push(self, node: AstNode) -> AstIdx:
        """Append *node* and return its index.

        Raises:
            ValueError: If *node* refers to an index that is not already in
                the arena.
        """
        idx = len(self._nodes)
        for child in children(node.kind):
            if not 0 <= child < idx:
                raise ValueError(
                    f"Node #{idx} ({type(node.kind).__name__}) refers to #{child}; "
                    "children must precede their parent"
                )
        self._nodes.append(node)
        return idx

    def get(self, idx: AstIdx) -> AstNode:
        return self._nodes[idx]

    def __getitem__(self, idx: AstIdx) -> AstNode:
        return self._nodes[idx]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[AstNode]:
        return iter(self._nodes)


# ---------------------------------------------------------------------------
# Module
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Module:
    """Result of a parse: top-level definitions plus the arena holding them."""

    definitions: tuple[AstIdx, ...]
    arena: Arena

    def get(self, idx: AstIdx) -> AstNode:
        """Return the node at *idx*."""
        return self.arena.get(idx)

    def __len__(self) -> int:
        return len(self.arena)


def parent_map(module: Module) -> dict[AstIdx, AstIdx]:
    """Map every non-root node index to the index of its parent.

    Built after the fact so nodes themselves never carry back-references.
    """
    parents: dict[AstIdx, AstIdx] = {}
    for idx, node in enumerate(module.arena):
        for child in children(node.kind):
            parents[child] = idx
    return parents
