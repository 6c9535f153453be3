"""Conversion of Wirth-style EBNF into plain BNF.

    <a> ::= <b> [ <c> ] <d> { <e> | <f> } <g>

becomes

    <a> ::= <b> <a-a> <d> <a-b> <g>
    <a-a> ::= <empty>
           |  <c>
    <a-b> ::= <empty>
           |  <e> <a-b>
           |  <f> <a-b>

The metasymbols ( ) [ ] { } are read as ordinary terminals; this pass takes
them out of the symbol list and rewrites the rules that use them.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator

from qtools.grammar import Element, Grammar, Production, Symbol, SymbolState

_QUOTE_PAIRS = {("<", ">"), ('"', '"'), ("'", "'")}


def _extension(number: int) -> str:
    """Letters naming an invented symbol: 0 -> a, 1 -> b, 26 -> ab."""
    letters = []
    while True:
        letters.append(chr(ord("a") + number % 26))
        number //= 26
        if number == 0:
            return "".join(letters)


class _Converter:
    def __init__(self, grammar: Grammar) -> None:
        self.grammar = grammar
        lparen = self._take_metasymbol("(")
        rparen = self._take_metasymbol(")")
        lsquare = self._take_metasymbol("[")
        rsquare = self._take_metasymbol("]")
        lcurly = self._take_metasymbol("{")
        rcurly = self._take_metasymbol("}")
        self._closers = [
            (symbol, char)
            for symbol, char in ((rparen, ")"), (rsquare, "]"), (rcurly, "}"))
            if symbol is not None
        ]
        finish_none: Callable[[Symbol], None] = lambda symbol: None
        self._openers: list[tuple[Symbol, Symbol | None, str, Callable[[Symbol], None]]] = [
            (opener, closer, char, finish)
            for opener, closer, char, finish in (
                (lparen, rparen, ")", finish_none),
                (lsquare, rsquare, "]", self._add_empty_rule),
                (lcurly, rcurly, "}", self._make_iterative),
            )
            if opener is not None
        ]

    def _take_metasymbol(self, name: str) -> Symbol | None:
        """Remove the symbol called name from the grammar; it becomes a metasymbol."""
        symbol = self.grammar.lookup(name)
        if symbol is None:
            return None
        if not symbol.is_terminal():
            self.grammar.error("BRACE SHOULD BE NONTERMINAL", symbol.productions[0].line)
        self.grammar.symbols.remove(symbol)
        return symbol

    def _invent(self, base: Symbol, counter: Iterator[int], line: int) -> Symbol:
        """Define a fresh symbol whose name is derived from the name of base."""
        name = base.name
        if (name[0], name[-1]) in _QUOTE_PAIRS:
            stem, quote = name[:-1], name[-1]
        else:
            stem, quote = name, ""
        for number in counter:
            candidate = f"{stem}-{_extension(number)}{quote}"
            if self.grammar.lookup(candidate) is None:
                return self.grammar.define(candidate, line)
        raise AssertionError("unreachable")  # the counter never ends

    def _fill_empty_bracket(self, rule: Production, error_line: int) -> None:
        self.grammar.error("EMPTY BRACKETED RULE", error_line)
        if self.grammar.empty is not None:
            rule.elements = [Element(self.grammar.empty, rule.line)]

    @staticmethod
    def _take_following(owner: Symbol, production: Production) -> Production | None:
        """Remove and return the rule of owner that follows production, if any."""
        index = owner.productions.index(production)
        if index + 1 < len(owner.productions):
            return owner.productions.pop(index + 1)
        return None

    def _extract(
        self,
        owner: Symbol,
        production: Production,
        index: int,
        closer: Symbol | None,
        closer_char: str,
        counter: Iterator[int],
    ) -> Symbol:
        """Move the bracketed body starting at index into the rules of a new symbol."""
        element = production.elements[index]
        opener = element.symbol
        new_symbol = self._invent(owner, counter, element.line)
        new_symbol.line = element.line

        rule = Production(
            elements=production.elements[index + 1:],
            line=element.line,
            state=SymbolState.UNTOUCHED,
        )
        del production.elements[index + 1:]
        new_symbol.productions.append(rule)
        element.symbol = new_symbol

        nest = 0
        position = 0
        rest: list[Element] | None = None
        close_line = rule.line
        while True:
            if position >= len(rule.elements):
                if not rule.elements:
                    self._fill_empty_bracket(rule, rule.line)
                following = self._take_following(owner, production)
                if following is None:
                    break
                new_symbol.productions.append(following)
                rule = following
                position = 0
                continue
            current = rule.elements[position]
            if current.symbol is closer:
                if nest == 0:
                    rest = rule.elements[position + 1:]
                    close_line = current.line
                    del rule.elements[position:]
                    break
                nest -= 1
            elif current.symbol is opener:
                nest += 1
            position += 1

        if rest is not None:
            production.elements.extend(rest)
            if not rule.elements:
                self._fill_empty_bracket(rule, close_line)
        else:
            self.grammar.error(f"MISSING {closer_char}", rule.line)
        return new_symbol

    def _add_empty_rule(self, symbol: Symbol) -> None:
        """Put an <empty> alternative in front of the rules of symbol."""
        line = symbol.productions[0].line
        if self.grammar.empty is None:
            self.grammar.error("EMPTY SYMBOL MUST BE DEFINED", line)
            return
        symbol.productions.insert(
            0,
            Production(
                elements=[Element(self.grammar.empty, line)],
                line=line,
                state=SymbolState.UNTOUCHED,
            ),
        )

    def _make_iterative(self, symbol: Symbol) -> None:
        """End every rule of symbol with a self reference, then allow it to be empty."""
        for production in symbol.productions:
            line = production.elements[-1].line if production.elements else production.line
            production.elements.append(Element(symbol, line))
        self._add_empty_rule(symbol)

    def _unexpected(self, symbol: Symbol) -> str | None:
        return next((char for closer, char in self._closers if symbol is closer), None)

    def _opening(self, symbol: Symbol):
        return next((entry for entry in self._openers if symbol is entry[0]), None)

    def process(self, symbol: Symbol) -> None:
        counter = itertools.count()
        for production in symbol.productions:
            position = 0
            while position < len(production.elements):
                element = production.elements[position]
                char = self._unexpected(element.symbol)
                if char is not None:
                    self.grammar.error(f"UNEXPECTED {char}", element.line)
                    del production.elements[position]
                    continue
                opening = self._opening(element.symbol)
                if opening is not None:
                    _, closer, closer_char, finish = opening
                    new_symbol = self._extract(
                        symbol, production, position, closer, closer_char, counter
                    )
                    self.process(new_symbol)
                    finish(new_symbol)
                position += 1
        symbol.state = SymbolState.TOUCHED


def deebnf(grammar: Grammar) -> None:
    """Rewrite ( ), [ ] and { } groups in the grammar as plain BNF rules."""
    converter = _Converter(grammar)
    grammar.reset_reachability()
    for symbol in grammar.symbols:
        if symbol.state is SymbolState.UNTOUCHED:
            converter.process(symbol)