"""String interning for Blossom symbols."""

from __future__ import annotations

from typing import NewType

# Opaque handle for an interned string. Only meaningful against the
# ``Interner`` that produced it.
Symbol = NewType("Symbol", int)


class Interner:
    """Bidirectional string <-> ``Symbol`` table.

    Symbols are dense small integers handed out in first-seen order, so the
    same spelling always maps to the same symbol within one interner.
    """

    def __init__(self) -> None:
        self._symbols: dict[str, Symbol] = {}
        self._strings: list[str] = []

    def intern(self, text: str) -> Symbol:
        """Return the symbol for *text*, creating it on first use."""
        symbol = self._symbols.get(text)
        if symbol is None:
            symbol = Symbol(len(self._strings))
            self._strings.append(text)
            self._symbols[text] = symbol
        return symbol

    def get(self, text: str) -> Symbol | None:
        """Return the symbol for *text* without creating one."""
        return self._symbols.get(text)

    def resolve(self, symbol: Symbol) -> str | None:
        """Return the string behind *symbol*, or None if it was never minted here."""
        if 0 <= symbol < len(self._strings):
            return self._strings[symbol]
        return None

    def __len__(self) -> int:
        return len(self._strings)

    def __contains__(self, text: object) -> bool:
        return text in self._symbols

    def __repr__(self) -> str:
        return f"Interner({len(self._strings)} symbols)"
