"""Grammar data model: symbols, production rules and their elements."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TextIO

STRING_LIMIT = 10000
"""Capacity of the symbol name pool, in characters (one extra per name)."""

SYMBOL_LENGTH = 50
"""Maximum number of characters in any symbol name."""

COMMENT = "#"
RULE_SYMBOL = "::="


class SymbolState(Enum):
    """Marks used by the analyses to classify symbols and rules."""

    IS_EMPTY = auto()
    CAN_BE_EMPTY = auto()
    TOUCHED = auto()
    UNTOUCHED = auto()


@dataclass(eq=False)
class Element:
    """One occurrence of a symbol on the right-hand side of a rule."""

    symbol: Symbol
    line: int = -1


@dataclass(eq=False)
class Production:
    """One alternative of a nonterminal: a sequence of elements."""

    elements: list[Element] = field(default_factory=list)
    line: int = -1
    state: SymbolState = SymbolState.UNTOUCHED


@dataclass(eq=False)
class Symbol:
    """A terminal or nonterminal symbol; nonterminals own productions."""

    name: str
    line: int = -1
    productions: list[Production] = field(default_factory=list, repr=False)
    state: SymbolState = SymbolState.UNTOUCHED
    starter: list[Symbol] = field(default_factory=list, repr=False)
    follows: list[Symbol] = field(default_factory=list, repr=False)

    def is_terminal(self) -> bool:
        """A symbol is terminal when no rule defines it."""
        return not self.productions


def same_rule(p: Production, q: Production) -> bool:
    """True when both rules reference the same symbols in the same order."""
    if len(p.elements) != len(q.elements):
        return False
    return all(a.symbol is b.symbol for a, b in zip(p.elements, q.elements))


class Grammar:
    """A whole grammar: its symbols in definition order, head and empty symbol."""

    def __init__(self, errors: TextIO | None = None) -> None:
        self.symbols: list[Symbol] = []
        self.head: Symbol | None = None
        self.empty: Symbol | None = None
        self.diagnostics: list[tuple[str, int]] = []
        self._errors = errors
        self._pool_used = 0

    def lookup(self, name: str) -> Symbol | None:
        """Return the symbol called name, or None if there is none."""
        return next((s for s in self.symbols if s.name == name), None)

    def define(self, name: str, line: int) -> Symbol:
        """Create a new symbol, first seen on the given line, and append it."""
        needed = len(name) + 1
        if self._pool_used + needed > STRING_LIMIT:
            self.error("STRING POOL OVERVLOW", line)
        self._pool_used = min(STRING_LIMIT, self._pool_used + needed)
        symbol = Symbol(name=name, line=line)
        self.symbols.append(symbol)
        return symbol

    def error(self, message: str, line: int) -> None:
        """Report a problem, attributed to a source line when line > 0."""
        self.diagnostics.append((message, line))
        stream = self._errors if self._errors is not None else sys.stderr
        where = f" on line {line}" if line > 0 else ""
        stream.write(f" >>{message}{where}<<\n")

    def reset_reachability(self) -> None:
        """Mark every symbol as not yet reached."""
        for symbol in self.symbols:
            symbol.state = SymbolState.UNTOUCHED

    def touch_reachable(self, symbol: Symbol) -> None:
        """Mark symbol and every untouched symbol reachable from it as touched."""
        symbol.state = SymbolState.TOUCHED
        pending = [symbol]
        while pending:
            current = pending.pop()
            for production in current.productions:
                for element in production.elements:
                    target = element.symbol
                    if target.state is SymbolState.UNTOUCHED:
                        target.state = SymbolState.TOUCHED
                        pending.append(target)