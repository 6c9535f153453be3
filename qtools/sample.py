"""Random derivation of a string from a grammar."""

from __future__ import annotations

import io
import random
from typing import TextIO

from qtools.grammar import Grammar, Symbol
from qtools.writer import OutputWriter


def write_sample(
    grammar: Grammar, stream: TextIO | None = None, rng: random.Random | None = None
) -> None:
    """Write one randomly derived sentence of grammar, followed by a newline."""
    rng = rng if rng is not None else random.Random()
    out = OutputWriter(stream)
    pending: list[Symbol] = [grammar.head] if grammar.head is not None else []
    while pending:
        symbol = pending.pop()
        if symbol.is_terminal():
            out.space_or_wrap(symbol, 1, " ")
            out.symbol(symbol)
            continue
        production = symbol.productions[rng.randrange(len(symbol.productions))]
        pending.extend(
            element.symbol
            for element in reversed(production.elements)
            if element.symbol is not grammar.empty
        )
    out.newline()


def sample(grammar: Grammar, rng: random.Random | None = None) -> str:
    """Return the text write_sample would produce."""
    buffer = io.StringIO()
    write_sample(grammar, buffer, rng)
    return buffer.getvalue()