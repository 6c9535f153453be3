from qtools.reader import read_grammar
from qtools.startfollow import compute_start_follow

TEXT = "> <s>\n<s> ::= <a> b\n<a> ::= x\n     | y <a>\n"


def _names(symbols):
    return [s.name for s in symbols]


def _computed(text=TEXT):
    grammar = read_grammar(text)
    compute_start_follow(grammar)
    return grammar


def test_terminals_start_with_themselves():
    grammar = _computed()
    for name in ("b", "x", "y"):
        symbol = grammar.lookup(name)
        assert symbol.starter == [symbol]


def test_nonterminal_start_sets():
    grammar = _computed()
    assert set(_names(grammar.lookup("<a>").starter)) == {"x", "y"}
    assert grammar.lookup("<s>").starter == grammar.lookup("<a>").starter


def test_follow_from_next_element():
    grammar = _computed()
    assert _names(grammar.lookup("<a>").follows) == ["b"]
    assert set(_names(grammar.lookup("y").follows)) == set(
        _names(grammar.lookup("<a>").starter)
    )


def test_follow_pushed_to_rule_ends():
    grammar = _computed()
    assert grammar.lookup("x").follows == grammar.lookup("<a>").follows


def test_sets_have_no_duplicates():
    grammar = _computed()
    for symbol in grammar.symbols:
        assert len(symbol.starter) == len(set(map(id, symbol.starter)))
        assert len(symbol.follows) == len(set(map(id, symbol.follows)))


def test_unreachable_symbols_untouched():
    grammar = _computed(TEXT + "<z> ::= q r\n")
    assert grammar.lookup("<z>").starter == []
    assert grammar.lookup("q").follows == []
    assert grammar.lookup("q").starter == []


def test_no_head_computes_nothing():
    grammar = _computed("<a> ::= x y\n")
    assert all(not s.starter and not s.follows for s in grammar.symbols)