"""Start and follow sets of the symbols reachable from the distinguished symbol."""

from __future__ import annotations

from collections.abc import Iterable

from qtools.grammar import Grammar, Symbol, SymbolState


def _add_all(target: list[Symbol], symbols: Iterable[Symbol]) -> bool:
    """Append to target each symbol it lacks; report whether any was added."""
    added = False
    for symbol in list(symbols):
        if symbol not in target:
            target.append(symbol)
            added = True
    return added


def _reachable(grammar: Grammar) -> list[Symbol]:
    return [s for s in grammar.symbols if s.state is SymbolState.TOUCHED]


def _compute_starts(grammar: Grammar) -> None:
    changed = True
    while changed:
        changed = False
        for symbol in _reachable(grammar):
            if symbol.is_terminal():
                changed = _add_all(symbol.starter, [symbol]) or changed
                continue
            for production in symbol.productions:
                if production.elements:
                    first = production.elements[0].symbol
                    changed = _add_all(symbol.starter, first.starter) or changed


def _compute_follows(grammar: Grammar) -> None:
    for symbol in _reachable(grammar):
        for production in symbol.productions:
            for before, after in zip(production.elements, production.elements[1:]):
                _add_all(before.symbol.follows, after.symbol.starter)

    changed = True
    while changed:
        changed = False
        for symbol in _reachable(grammar):
            for production in symbol.productions:
                if production.elements:
                    last = production.elements[-1].symbol
                    changed = _add_all(last.follows, symbol.follows) or changed


def compute_start_follow(grammar: Grammar) -> None:
    """Fill in starter and follows of every symbol reachable from the head."""
    grammar.reset_reachability()
    if grammar.head is not None:
        grammar.touch_reachable(grammar.head)
    _compute_starts(grammar)
    _compute_follows(grammar)