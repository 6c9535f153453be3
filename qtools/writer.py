"""Column-tracking text output for grammar listings."""

from __future__ import annotations

import sys
from typing import TextIO

from qtools.grammar import Symbol

LINE_WIDTH = 80


class OutputWriter:
    """Writes text to a stream while tracking the current output column."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.column = 0

    def newline(self) -> None:
        """End the current line."""
        self.stream.write("\n")
        self.column = 0

    def char(self, ch: str) -> None:
        """Write one character."""
        self.stream.write(ch)
        self.column += 1

    def string(self, text: str) -> None:
        """Write a string character by character."""
        for ch in text:
            self.char(ch)

    def spaces(self, column: int) -> None:
        """Write spaces until the given column is reached."""
        while self.column < column:
            self.char(" ")

    def space_or_wrap(self, symbol: Symbol, column: int, lead: str) -> None:
        """Write a space, or wrap to column (starting with lead) if symbol won't fit."""
        if self.column + 1 + len(symbol.name) > LINE_WIDTH:
            self.newline()
            if column > 1:
                self.char(lead)
            self.spaces(column)
        else:
            self.char(" ")

    def symbol(self, symbol: Symbol) -> None:
        """Write the name of a symbol."""
        self.string(symbol.name)