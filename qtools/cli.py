"""Command-line tools that read a grammar on standard input and act on it."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence

from qtools.deebnf import deebnf
from qtools.deempty import deempty
from qtools.grammar import Grammar
from qtools.grammar_writer import write_grammar
from qtools.reader import read_grammar
from qtools.sample import write_sample
from qtools.squeeze import squeeze
from qtools.startfollow import compute_start_follow
from qtools.stats import format_stats, grammar_stats


def _read(prog: str, description: str, argv: Sequence[str] | None) -> Grammar:
    argparse.ArgumentParser(prog=prog, description=description).parse_args(argv)
    return read_grammar(sys.stdin)


def _transform(
    prog: str, description: str, step: Callable[[Grammar], None], argv: Sequence[str] | None
) -> int:
    grammar = _read(prog, description, argv)
    step(grammar)
    write_grammar(grammar)
    return 0


def gcopy_main(argv: Sequence[str] | None = None) -> int:
    """Copy a grammar from standard input to standard output."""
    return _transform("gcopy", "Copy a grammar.", lambda grammar: None, argv)


def gdeebnf_main(argv: Sequence[str] | None = None) -> int:
    """Convert a grammar from EBNF to BNF."""
    return _transform("gdeebnf", "Convert a grammar from EBNF to BNF.", deebnf, argv)


def gdeempty_main(argv: Sequence[str] | None = None) -> int:
    """Remove the empty symbol from a grammar."""
    return _transform("gdeempty", "Remove empty symbols from a grammar.", deempty, argv)


def gsqueeze_main(argv: Sequence[str] | None = None) -> int:
    """Squeeze redundant rules and symbols out of a grammar."""
    return _transform("gsqueeze", "Squeeze redundant rules out of a grammar.", squeeze, argv)


def gstartfollow_main(argv: Sequence[str] | None = None) -> int:
    """Write a grammar annotated with start and follow sets."""
    return _transform(
        "gstartfollow",
        "Compute start and follow sets for a grammar.",
        compute_start_follow,
        argv,
    )


def gsample_main(argv: Sequence[str] | None = None) -> int:
    """Write one random sentence derived from a grammar."""
    grammar = _read("gsample", "Sample the strings of a grammar.", argv)
    write_sample(grammar, sys.stdout, random.Random())
    return 0


def gstats_main(argv: Sequence[str] | None = None) -> int:
    """Write statistics about a grammar."""
    grammar = _read("gstats", "Compute statistics about a grammar.", argv)
    sys.stdout.write(format_stats(grammar_stats(grammar)))
    return 0


_COMMANDS: dict[str, Callable[[Sequence[str] | None], int]] = {
    "copy": gcopy_main,
    "deebnf": gdeebnf_main,
    "deempty": gdeempty_main,
    "sample": gsample_main,
    "squeeze": gsqueeze_main,
    "startfollow": gstartfollow_main,
    "stats": gstats_main,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the grammar tools, chosen by its name."""
    parser = argparse.ArgumentParser(
        prog="qtools", description="Grammar tools reading standard input."
    )
    parser.add_argument("command", choices=sorted(_COMMANDS))
    args, rest = parser.parse_known_args(argv)
    return _COMMANDS[args.command](rest)


if __name__ == "__main__":
    sys.exit(main())