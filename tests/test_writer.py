import io

from qtools.grammar import Symbol
from qtools.writer import LINE_WIDTH, OutputWriter


def make_writer():
    stream = io.StringIO()
    return OutputWriter(stream), stream


def test_string_tracks_column():
    w, stream = make_writer()
    w.string("::=")
    assert stream.getvalue() == "::="
    assert w.column == len("::=")


def test_newline_resets_column():
    w, stream = make_writer()
    w.string("abc")
    w.newline()
    assert w.column == 0
    w.char("#")
    assert stream.getvalue() == "abc\n#"
    assert w.column == 1


def test_spaces_pad_to_column():
    w, stream = make_writer()
    w.char("x")
    w.spaces(4)
    assert stream.getvalue() == "x" + " " * 3
    assert w.column == 4
    w.spaces(2)
    assert w.column == 4


def test_symbol_writes_name():
    w, stream = make_writer()
    w.symbol(Symbol("<expression>"))
    assert stream.getvalue() == "<expression>"
    assert w.column == len("<expression>")


def test_space_when_symbol_fits():
    w, stream = make_writer()
    text = "x" * 10
    w.string(text)
    w.space_or_wrap(Symbol("<a>"), 5, "#")
    assert stream.getvalue() == text + " "


def test_exact_fit_does_not_wrap():
    w, stream = make_writer()
    name = "y" * 9
    text = "x" * (LINE_WIDTH - 1 - len(name))
    w.string(text)
    w.space_or_wrap(Symbol(name), 5, "#")
    assert stream.getvalue() == text + " "


def test_wrap_with_lead_character():
    w, stream = make_writer()
    name = "y" * 10
    text = "x" * (LINE_WIDTH - len(name))
    w.string(text)
    w.space_or_wrap(Symbol(name), 5, "#")
    assert stream.getvalue() == text + "\n#" + " " * (5 - 1)
    assert w.column == 5


def test_wrap_to_first_column_has_no_lead():
    w, stream = make_writer()
    name = "y" * 10
    text = "x" * LINE_WIDTH
    w.string(text)
    w.space_or_wrap(Symbol(name), 1, "#")
    assert stream.getvalue() == text + "\n "
    assert w.column == 1