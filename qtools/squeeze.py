"""Shrinking a grammar by removing duplicate rules and inlining single-rule symbols.

    <a> ::= <b>
         |  x <e>
         |  x <e>    -- duplicate rule, removed
    <b> ::= y <c>    -- only rule of <b>, inlined

becomes

    <a> ::= y <c>
         |  x <e>
"""

from __future__ import annotations

from qtools.grammar import Element, Grammar, same_rule


def _squeeze_rules(grammar: Grammar) -> bool:
    changed = False
    for symbol in grammar.symbols:
        kept = []
        for production in symbol.productions:
            if any(same_rule(production, other) for other in kept):
                changed = True
            else:
                kept.append(production)
        symbol.productions[:] = kept
    return changed


def _squeeze_symbols(grammar: Grammar) -> bool:
    changed = False
    for symbol in grammar.symbols:
        for production in symbol.productions:
            elements = production.elements
            position = 0
            while position < len(elements):
                element = elements[position]
                target = element.symbol
                if len(target.productions) == 1 and target.productions[0].elements:
                    first, *rest = list(target.productions[0].elements)
                    element.symbol = first.symbol
                    inserted = [Element(e.symbol, element.line) for e in rest]
                    elements[position + 1:position + 1] = inserted
                    position += len(inserted)
                    changed = True
                position += 1
    return changed


def squeeze(grammar: Grammar) -> None:
    """Repeat rule and symbol squeezing until the grammar stops changing."""
    while True:
        changed = _squeeze_rules(grammar)
        changed = _squeeze_symbols(grammar) or changed
        if not changed:
            return