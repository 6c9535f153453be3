"""Counting symbols and rules of a grammar, and which of them are unused."""

from __future__ import annotations

from dataclasses import dataclass

from qtools.grammar import Grammar, SymbolState


@dataclass(frozen=True)
class GrammarStats:
    """Counts of symbols and rules, including those unreachable from the head."""

    symbols: int
    terminals: int
    extraneous_symbols: int
    rules: int
    extraneous_rules: int


def grammar_stats(grammar: Grammar) -> GrammarStats:
    """Count symbols and rules; marks reachable symbols as touched."""
    symbols = len(grammar.symbols)
    terminals = sum(1 for s in grammar.symbols if s.is_terminal())
    rules = sum(len(s.productions) for s in grammar.symbols)

    grammar.reset_reachability()
    if grammar.head is not None:
        grammar.touch_reachable(grammar.head)

    unreached = [s for s in grammar.symbols if s.state is SymbolState.UNTOUCHED]
    return GrammarStats(
        symbols=symbols,
        terminals=terminals,
        extraneous_symbols=len(unreached),
        rules=rules,
        extraneous_rules=sum(len(s.productions) for s in unreached),
    )


def format_stats(stats: GrammarStats) -> str:
    """Render the statistics report, one line per figure."""
    lines = [
        f" -- Total symbols:        {stats.symbols}",
        f" --   Terminal symbols:   {stats.terminals}",
    ]
    if stats.extraneous_symbols:
        lines.append(f" --   Extraneous symbols: {stats.extraneous_symbols}")
    lines.append(f" -- Production rules:     {stats.rules}")
    if stats.extraneous_rules:
        lines.append(f" --   Extraneous rules:   {stats.extraneous_rules}")
    return "\n".join(lines) + "\n"