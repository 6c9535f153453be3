from qtools.deempty import deempty
from qtools.grammar import SymbolState
from qtools.reader import read_grammar


def rules(grammar, name):
    symbol = grammar.lookup(name)
    return [[e.symbol.name for e in p.elements] for p in symbol.productions]


def convert(text):
    grammar = read_grammar(text)
    deempty(grammar)
    return grammar


def test_documented_example():
    grammar = convert(
        "> <a>\n/ <empty>\n<a> ::= <b> <empty> <c>\n<b> ::= <d> | <empty>\n"
    )
    assert rules(grammar, "<a>") == [["<b>", "<c>"], ["<c>"]]
    assert rules(grammar, "<b>") == [["<d>"]]
    assert grammar.empty is None
    assert grammar.head is grammar.lookup("<a>")


def test_redundant_variant_not_added():
    grammar = convert("> <a>\n/ <empty>\n<a> ::= <b> x | x\n<b> ::= y | <empty>\n")
    assert rules(grammar, "<a>") == [["<b>", "x"], ["x"]]
    assert rules(grammar, "<b>") == [["y"]]


def test_nullable_head_keeps_empty_alternative():
    grammar = convert("> <a>\n/ <empty>\n<a> ::= x | <empty>\n")
    assert rules(grammar, "<a>") == [["<empty>"], ["x"]]
    assert grammar.empty is grammar.lookup("<empty>")
    assert grammar.head.state is SymbolState.CAN_BE_EMPTY


def test_empty_head_removes_head_and_empty():
    grammar = convert("> <a>\n/ <empty>\n<a> ::= <empty>\n")
    assert grammar.head is None
    assert grammar.empty is None


def test_missing_empty_symbol_reported():
    grammar = convert("> <a>\n<a> ::= x y\n")
    assert ("EMPTY SYMBOL MUST BE DEFINED", -1) in grammar.diagnostics
    assert rules(grammar, "<a>") == [["x", "y"]]


def test_no_rule_references_empty_symbol():
    grammar = read_grammar(
        "> <a>\n/ <empty>\n<a> ::= <b> <b>\n<b> ::= y | <empty>\n"
    )
    empty = grammar.empty
    deempty(grammar)
    head = grammar.head
    assert rules(grammar, "<a>") == [["<empty>"], ["<b>", "<b>"], ["<b>"]]
    for symbol in grammar.symbols:
        for production in symbol.productions:
            if symbol is head and production is head.productions[0]:
                continue
            assert all(e.symbol is not empty for e in production.elements)
            assert production.elements


def test_grammar_without_empty_references_keeps_rules():
    grammar = convert("> <a>\n/ <empty>\n<a> ::= x <b>\n<b> ::= y | z\n")
    assert rules(grammar, "<a>") == [["x", "<b>"]]
    assert rules(grammar, "<b>") == [["y"], ["z"]]
    assert grammar.empty is None