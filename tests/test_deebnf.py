from qtools.deebnf import deebnf
from qtools.reader import read_grammar


def rules(grammar, name):
    symbol = grammar.lookup(name)
    return [[e.symbol.name for e in p.elements] for p in symbol.productions]


def messages(grammar):
    return [message for message, _ in grammar.diagnostics]


def convert(text):
    grammar = read_grammar(text)
    deebnf(grammar)
    return grammar


def test_documented_example():
    grammar = convert(
        "> <a>\n/ <empty>\n<a> ::= <b> [ <c> ] <d> { <e> | <f> } <g>\n"
    )
    assert rules(grammar, "<a>") == [["<b>", "<a-a>", "<d>", "<a-b>", "<g>"]]
    assert rules(grammar, "<a-a>") == [["<empty>"], ["<c>"]]
    assert rules(grammar, "<a-b>") == [
        ["<empty>"],
        ["<e>", "<a-b>"],
        ["<f>", "<a-b>"],
    ]


def test_metasymbols_leave_symbol_list():
    grammar = convert("> <a>\n/ <empty>\n<a> ::= ( x ) [ y ] { z }\n")
    names = {symbol.name for symbol in grammar.symbols}
    assert names.isdisjoint({"(", ")", "[", "]", "{", "}"})
    for symbol in grammar.symbols:
        for production in symbol.productions:
            for element in production.elements:
                assert element.symbol.name not in {"(", ")", "[", "]", "{", "}"}


def test_grouped_alternatives():
    grammar = convert("> <a>\n/ <empty>\n<a> ::= ( x | y ) z\n")
    assert rules(grammar, "<a>") == [["<a-a>", "z"]]
    assert rules(grammar, "<a-a>") == [["x"], ["y"]]
    assert grammar.diagnostics == []


def test_nested_groups_named_after_owner():
    grammar = convert("> <a>\n/ <empty>\n<a> ::= ( ( x ) y )\n")
    assert rules(grammar, "<a>") == [["<a-a>"]]
    assert rules(grammar, "<a-a>") == [["<a-a-a>", "y"]]
    assert rules(grammar, "<a-a-a>") == [["x"]]


def test_repetition():
    grammar = convert("> <a>\n/ <empty>\n<a> ::= { x } y\n")
    assert rules(grammar, "<a>") == [["<a-a>", "y"]]
    assert rules(grammar, "<a-a>") == [["<empty>"], ["x", "<a-a>"]]


def test_unquoted_name_gets_suffix():
    grammar = convert("> s\n/ e\ns ::= [ x ]\n")
    assert rules(grammar, "s") == [["s-a"]]
    assert rules(grammar, "s-a") == [["e"], ["x"]]


def test_invented_name_skips_existing_symbol():
    grammar = convert("> <a>\n/ <empty>\n<a> ::= [ x ]\n<a-a> ::= q\n")
    assert rules(grammar, "<a>") == [["<a-b>"]]
    assert rules(grammar, "<a-a>") == [["q"]]
    assert rules(grammar, "<a-b>") == [["<empty>"], ["x"]]


def test_unexpected_closer_removed():
    grammar = convert("> <a>\n/ <empty>\n<a> ::= x ) y\n")
    assert "UNEXPECTED )" in messages(grammar)
    assert rules(grammar, "<a>") == [["x", "y"]]


def test_missing_closer_reported():
    grammar = convert("> <a>\n/ <empty>\n<a> ::= [ x\n")
    assert "MISSING ]" in messages(grammar)
    assert rules(grammar, "<a>") == [["<a-a>"]]
    assert rules(grammar, "<a-a>") == [["<empty>"], ["x"]]


def test_empty_brackets_get_empty_symbol():
    grammar = convert("> <a>\n/ <empty>\n<a> ::= ( ) x\n")
    assert "EMPTY BRACKETED RULE" in messages(grammar)
    assert rules(grammar, "<a>") == [["<a-a>", "x"]]
    assert rules(grammar, "<a-a>") == [["<empty>"]]


def test_option_without_empty_symbol():
    grammar = convert("> <a>\n<a> ::= [ x ]\n")
    assert "EMPTY SYMBOL MUST BE DEFINED" in messages(grammar)
    assert rules(grammar, "<a-a>") == [["x"]]


def test_defined_brace_is_reported_and_removed():
    grammar = convert("> <a>\n<a> ::= x\n( ::= y\n")
    assert "BRACE SHOULD BE NONTERMINAL" in messages(grammar)
    assert grammar.lookup("(") is None


def test_plain_grammar_unchanged():
    grammar = convert("> <a>\n<a> ::= x <b>\n<b> ::= y | z\n")
    assert rules(grammar, "<a>") == [["x", "<b>"]]
    assert rules(grammar, "<b>") == [["y"], ["z"]]
    assert grammar.diagnostics == []