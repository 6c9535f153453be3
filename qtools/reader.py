"""Reader for the plain-text BNF grammar notation.

Rules look like ``<nonterminal> ::= <a> b "c" 'd'``; the separator may also
be ``:``, ``=`` or ``:=``.  Indented lines continue a rule, ``|`` separates
alternatives, ``> <sym>`` names the distinguished symbol, ``/ <sym>`` names
the empty symbol and ``#`` starts a comment line.
"""

from __future__ import annotations

from typing import TextIO

from qtools.grammar import COMMENT, SYMBOL_LENGTH, Element, Grammar, Production, Symbol


def _is_ascii_alnum(ch: str | None) -> bool:
    return ch is not None and ("a" <= ch <= "z" or "A" <= ch <= "Z" or "0" <= ch <= "9")


class _Parser:
    def __init__(self, text: str, grammar: Grammar) -> None:
        self._text = text
        self._pos = 0
        self.grammar = grammar
        self.line = 1
        self.ch: str | None = None
        self.end_list = False
        self.end_rule = False
        self._advance()

    def _advance(self) -> None:
        if self._pos < len(self._text):
            self.ch = self._text[self._pos]
            self._pos += 1
        else:
            self.ch = None

    def _newline(self) -> None:
        self.line += 1
        self._advance()

    def _skip_line(self) -> None:
        while self.ch not in ("\n", None):
            self._advance()
        if self.ch == "\n":
            self._newline()

    def _skip_white(self) -> None:
        while self.ch in ("\t", " "):
            self._advance()

    def _nonblank(self) -> None:
        while self.ch in ("|", " ", "\t", "\n", None):
            if self.ch == "|":
                self.end_list = True
                self._advance()
                return
            if self.ch is None:
                self.end_rule = True
                self.end_list = True
                return
            if self.ch == "\n":
                self._newline()
                if self.ch not in (" ", "\t"):
                    self.end_rule = True
                    self.end_list = True
                    return
            else:
                self._advance()

    def _extend(self, name: list[str], ch: str | None) -> None:
        if len(name) >= SYMBOL_LENGTH:
            self.grammar.error("SYMBOL TOO LONG", self.line)
        elif ch is not None:
            name.append(ch)

    def _get_symbol(self) -> Symbol:
        """Read one symbol starting at the current (nonblank) character."""
        first = self.ch
        name = [first] if first is not None else []

        if first == "<":
            self._advance()
            if _is_ascii_alnum(self.ch):
                while True:
                    self._extend(name, self.ch)
                    if self.ch == ">":
                        break
                    self._advance()
                    if self.ch in ("\n", None):
                        break
                if self.ch == ">":
                    self._advance()
                else:
                    self.grammar.error("MISSING CLOSING > MARK", self.line)
                    self._extend(name, ">")
            else:
                while True:
                    self._extend(name, self.ch)
                    self._advance()
                    if self.ch in (" ", "\t", "\n", None):
                        break

        elif first in ('"', "'"):
            self._advance()
            while self.ch not in (first, "\n", None):
                self._extend(name, self.ch)
                self._advance()
            if self.ch == first:
                self._extend(name, self.ch)
                self._advance()
            else:
                self.grammar.error("MISSING CLOSING QUOTE", self.line)
                self._extend(name, first)

        else:
            self._advance()
            while self.ch not in (" ", "\t", "\n", None):
                self._extend(name, self.ch)
                self._advance()

        text = "".join(name)
        found = self.grammar.lookup(text)
        return found if found is not None else self.grammar.define(text, self.line)

    def _get_symbol_list(self) -> list[Element]:
        elements = []
        while True:
            self._nonblank()
            if self.end_list:
                self.end_list = False
                return elements
            line = self.line
            elements.append(Element(self._get_symbol(), line))

    def _get_productions(self) -> list[Production]:
        productions = []
        while True:
            production = Production(line=self.line)
            self._nonblank()
            if not self.end_list:
                production.elements = self._get_symbol_list()
            else:
                self.grammar.error("EMPTY PRODUCTION RULE", production.line)
                if self.grammar.empty is not None:
                    production.elements = [Element(self.grammar.empty, self.line)]
                self.end_list = False
            productions.append(production)
            if self.end_rule:
                break
        self.end_rule = False
        self.end_list = False
        return productions

    def _rule_separator(self) -> bool:
        """Consume ``::=``, ``:=``, ``:`` or ``=``; report whether one was there."""
        if self.ch == ":":
            self._advance()
            if self.ch == ":":
                self._advance()
                if self.ch == "=":
                    self._advance()
            elif self.ch == "=":
                self._advance()
            return True
        if self.ch == "=":
            self._advance()
            return True
        return False

    def _marker_symbol(self, missing: str) -> Symbol | None:
        self._advance()
        self._skip_white()
        if self.ch in ("\n", None):
            self.grammar.error(missing, self.line)
            return None
        return self._get_symbol()

    def parse(self) -> Grammar:
        grammar = self.grammar
        while self.ch is not None:
            while self.ch == "\n":
                self._newline()
            if self.ch == ">":
                if grammar.head is not None:
                    grammar.error("EXTRA DISTINGUISHED SYMBOL", self.line)
                else:
                    grammar.head = self._marker_symbol("NO DISTINGUISHED SYMBOL")
                self._skip_line()
            elif self.ch == "/":
                if grammar.empty is not None:
                    grammar.error("EXTRA EMPTY SYMBOL", self.line)
                    self._skip_line()
                else:
                    grammar.empty = self._marker_symbol("NO EMPTY SYMBOL")
                self._skip_line()
            elif self.ch == COMMENT:
                self._skip_line()
            elif self.ch is not None:
                symbol = self._get_symbol()
                self._skip_white()
                if self._rule_separator():
                    symbol.productions.extend(self._get_productions())
                else:
                    grammar.error("MISSING ::= OR EQUIVALENT", self.line)
                    self._skip_line()

        if grammar.head is None:
            grammar.error("DISTINGUISHED SYMBOL NOT GIVEN", -1)
        elif grammar.head.is_terminal():
            grammar.error("DISTINGUISHED SYMBOL IS TERMINAL", grammar.head.line)
        if grammar.empty is not None and not grammar.empty.is_terminal():
            grammar.error(
                "EMPTY SYMBOL IS NONTERMINAL", grammar.empty.productions[0].line
            )
        return grammar


def read_grammar(source: str | TextIO) -> Grammar:
    """Parse a grammar from a string or a readable text stream."""
    text = source if isinstance(source, str) else source.read()
    return _Parser(text, Grammar()).parse()