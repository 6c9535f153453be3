import io

import pytest

from qtools import cli
from qtools.deebnf import deebnf
from qtools.deempty import deempty
from qtools.grammar_writer import format_grammar
from qtools.reader import read_grammar
from qtools.squeeze import squeeze
from qtools.startfollow import compute_start_follow
from qtools.stats import format_stats, grammar_stats

GRAMMAR = "> <a>\n/ <empty>\n<a> ::= <b> x | x\n<b> ::= y | <empty>\n"
EBNF = "> <a>\n/ <empty>\n<a> ::= [ x ] { y } z\n"


def run(monkeypatch, capsys, function, text, argv=()):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    status = function(list(argv))
    return status, capsys.readouterr().out


def expected(text, step=None):
    grammar = read_grammar(text)
    if step is not None:
        step(grammar)
    return format_grammar(grammar)


def test_gcopy(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, cli.gcopy_main, GRAMMAR)
    assert status == 0
    assert out == expected(GRAMMAR)
    assert out.startswith("> <a>\n/ <empty>\n")


def test_gdeebnf(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, cli.gdeebnf_main, EBNF)
    assert status == 0
    assert out == expected(EBNF, deebnf)
    assert "[" not in out and "{" not in out


def test_gdeempty(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, cli.gdeempty_main, GRAMMAR)
    assert status == 0
    assert out == expected(GRAMMAR, deempty)
    assert "/ <empty>" not in out


def test_gsqueeze(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, cli.gsqueeze_main, GRAMMAR)
    assert status == 0
    assert out == expected(GRAMMAR, squeeze)


def test_gstartfollow(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, cli.gstartfollow_main, GRAMMAR)
    assert status == 0
    assert out == expected(GRAMMAR, compute_start_follow)
    assert "# start set:" in out


def test_gstats(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, cli.gstats_main, GRAMMAR)
    assert status == 0
    assert out == format_stats(grammar_stats(read_grammar(GRAMMAR)))
    assert out.startswith(" -- Total symbols:")


def test_gsample_single_derivation(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("> <s>\n<s> ::= a b\n"))
    status = cli.gsample_main([])
    out = capsys.readouterr().out
    assert status == 0
    assert out == " a b\n"


def test_main_dispatches_by_name(monkeypatch, capsys):
    status, out = run(monkeypatch, capsys, cli.main, GRAMMAR, ["deempty"])
    assert status == 0
    assert out == expected(GRAMMAR, deempty)


def test_main_rejects_unknown_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(GRAMMAR))
    with pytest.raises(SystemExit) as raised:
        cli.main(["nonsense"])
    assert raised.value.code == 2