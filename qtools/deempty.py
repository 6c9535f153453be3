"""Removal of the empty symbol from a grammar.

    <a> ::= <b> <empty> <c>
    <b> ::= <d> | <empty>

becomes

    <a> ::= <b> <c>
         |  <c>
    <b> ::= <d>
"""

from __future__ import annotations

from qtools.grammar import Element, Grammar, Production, Symbol, SymbolState

IS_EMPTY = SymbolState.IS_EMPTY
CAN_BE_EMPTY = SymbolState.CAN_BE_EMPTY
NON_EMPTY = SymbolState.TOUCHED


def _check_empty(grammar: Grammar, symbol: Symbol) -> bool:
    """Update the emptiness marks of symbol and its rules; report any change."""
    changed = False
    any_empty = any_can_be = any_non_empty = False

    for production in symbol.productions:
        state = production.state
        for element in production.elements:
            element_state = element.symbol.state
            if element_state is NON_EMPTY:
                state = NON_EMPTY
            elif element_state is CAN_BE_EMPTY and state is IS_EMPTY:
                state = CAN_BE_EMPTY

        if production.state is not state:
            production.state = state
            changed = True

        if state is IS_EMPTY:
            any_empty = True
        elif state is CAN_BE_EMPTY:
            any_can_be = True
        else:
            any_non_empty = True

    if (any_empty and any_non_empty) or any_can_be:
        conclusion = CAN_BE_EMPTY
    elif any_empty:
        conclusion = IS_EMPTY
    elif any_non_empty:
        conclusion = NON_EMPTY
    else:
        grammar.error("ASSERTION FAILURE IN CHECKEMPTY", -1)
        return changed

    if symbol.state is not conclusion:
        symbol.state = conclusion
        changed = True
    return changed


def _add_without(symbol: Symbol, index: int, removed: Element) -> None:
    """Insert after rule index a copy of it lacking removed, unless empty or redundant."""
    production = symbol.productions[index]
    elements = [Element(e.symbol, e.line) for e in production.elements if e is not removed]
    if not elements:
        return
    candidate = Production(elements=elements, line=production.line, state=production.state)
    if any(
        len(other.elements) == len(elements)
        and all(a.symbol is b.symbol for a, b in zip(other.elements, elements))
        for other in symbol.productions
    ):
        return
    symbol.productions.insert(index + 1, candidate)


def _clean_symbol(symbol: Symbol) -> None:
    """Drop empty rules and empty elements, adding variants for optional ones."""
    if symbol.state is IS_EMPTY:
        return
    index = 0
    while index < len(symbol.productions):
        production = symbol.productions[index]
        if production.state is IS_EMPTY:
            del symbol.productions[index]
            continue
        position = 0
        while position < len(production.elements):
            element = production.elements[position]
            if element.symbol.state is IS_EMPTY:
                del production.elements[position]
                continue
            if element.symbol.state is CAN_BE_EMPTY:
                _add_without(symbol, index, element)
            position += 1
        index += 1


def deempty(grammar: Grammar) -> None:
    """Eliminate references to the empty symbol from the grammar."""
    empty = grammar.empty
    if empty is None:
        grammar.error("EMPTY SYMBOL MUST BE DEFINED", -1)
        return

    for symbol in grammar.symbols:
        if symbol.is_terminal():
            symbol.state = NON_EMPTY
        else:
            symbol.state = IS_EMPTY
            for production in symbol.productions:
                production.state = IS_EMPTY
    empty.state = IS_EMPTY

    changed = True
    while changed:
        changed = False
        for symbol in grammar.symbols:
            if not symbol.is_terminal():
                changed = _check_empty(grammar, symbol) or changed

    for symbol in grammar.symbols:
        if not symbol.is_terminal():
            _clean_symbol(symbol)

    head = grammar.head
    if head is not None and head.state is IS_EMPTY:
        grammar.head = None
        grammar.empty = None
    elif head is not None and head.state is CAN_BE_EMPTY:
        head.productions.insert(0, Production(elements=[Element(empty)]))
    else:
        grammar.empty = None