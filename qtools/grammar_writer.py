"""Writing a grammar back out in the plain-text BNF notation.

The distinguished symbol comes first, then the empty symbol if there is one,
then every rule reachable from the distinguished symbol.  Start and follow
sets, where computed, appear as comments under their rules.  Finally the
reachable terminals, the unused rules and the unused terminals are listed.
"""

from __future__ import annotations

import io
from typing import TextIO

from qtools.grammar import COMMENT, RULE_SYMBOL, Grammar, Production, Symbol, SymbolState
from qtools.writer import OutputWriter


class _GrammarWriter:
    def __init__(self, grammar: Grammar, stream: TextIO | None) -> None:
        self.grammar = grammar
        self.out = OutputWriter(stream)
        self.bar_column = 0
        self.cont_column = 0

    def _production(self, production: Production) -> None:
        for element in production.elements:
            self.out.space_or_wrap(element.symbol, self.cont_column, " ")
            self.out.symbol(element.symbol)

    def _symbol_set(self, title: str, symbols: list[Symbol]) -> None:
        out = self.out
        out.newline()
        out.char(COMMENT)
        out.string(title)
        self.cont_column = out.column + 1
        for symbol in symbols:
            out.space_or_wrap(symbol, self.cont_column, COMMENT)
            out.symbol(symbol)

    def _production_group(self, symbol: Symbol) -> None:
        out = self.out
        out.newline()
        out.symbol(symbol)
        out.char(" ")
        self.bar_column = out.column + 1
        out.string(RULE_SYMBOL)
        self.cont_column = out.column + 1

        first, *rest = symbol.productions
        self._production(first)
        for production in rest:
            out.newline()
            out.spaces(self.bar_column)
            out.string("| ")
            self._production(production)

        if symbol.starter:
            self._symbol_set(" start set:  ", symbol.starter)
        if symbol.follows:
            self._symbol_set(" follow set: ", symbol.follows)
        if symbol.starter or symbol.follows:
            out.newline()

    def _visit(self, symbol: Symbol) -> None:
        if not symbol.is_terminal():
            self._production_group(symbol)
        symbol.state = SymbolState.TOUCHED

    def _reachable(self, root: Symbol) -> None:
        """Depth-first, in rule order, writing each nonterminal when first met."""
        self._visit(root)
        stack = [self._children(root)]
        while stack:
            for child in stack[-1]:
                if child.state is SymbolState.UNTOUCHED:
                    self._visit(child)
                    stack.append(self._children(child))
                    break
            else:
                stack.pop()

    @staticmethod
    def _children(symbol: Symbol):
        return (
            element.symbol
            for production in symbol.productions
            for element in production.elements
        )

    def _listing(self, title: str, symbols: list[Symbol]) -> None:
        if not symbols:
            return
        out = self.out
        out.newline()
        out.newline()
        out.char(COMMENT)
        out.string(title)
        self.cont_column = out.column + 1
        for symbol in symbols:
            out.space_or_wrap(symbol, self.cont_column, COMMENT)
            out.symbol(symbol)

    def write(self) -> None:
        grammar = self.grammar
        out = self.out

        if grammar.head is not None:
            out.string("> ")
            out.symbol(grammar.head)
        else:
            out.char(COMMENT)
            out.string(" no distinguished symbol!")

        if grammar.empty is not None:
            out.newline()
            out.string("/ ")
            out.symbol(grammar.empty)

        grammar.reset_reachability()
        if grammar.head is not None:
            out.newline()
            self._reachable(grammar.head)

        self._listing(
            " terminals:  ",
            [s for s in grammar.symbols if s.is_terminal() and s.state is SymbolState.TOUCHED],
        )

        unused_rules = [
            s for s in grammar.symbols
            if not s.is_terminal() and s.state is SymbolState.UNTOUCHED
        ]
        if unused_rules:
            out.newline()
            out.newline()
            out.char(COMMENT)
            out.string(" unused productions")
            for symbol in unused_rules:
                self._production_group(symbol)

        self._listing(
            " unused terminals: ",
            [s for s in grammar.symbols if s.is_terminal() and s.state is SymbolState.UNTOUCHED],
        )
        out.newline()


def write_grammar(grammar: Grammar, stream: TextIO | None = None) -> None:
    """Write grammar to stream (standard output by default)."""
    _GrammarWriter(grammar, stream).write()


def format_grammar(grammar: Grammar) -> str:
    """Return the text that write_grammar would produce."""
    buffer = io.StringIO()
    write_grammar(grammar, buffer)
    return buffer.getvalue()