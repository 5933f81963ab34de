import pytest

import sexp


def test_round_trip():
    source = "(player (pos 1 2) (vel 3 4))"
    t = sexp.parse(source)
    assert repr(t) == source


def test_round_trip_nested():
    source = "(a (b (c d)) e)"
    t = sexp.parse(source)
    assert repr(t) == source


def test_round_trip_deeply_nested():
    source = "(a (b (c (d e))) f)"
    t = sexp.parse(source)
    assert repr(t) == source


def test_round_trip_atom():
    t = sexp.parse("hello")
    assert repr(t) == "hello"


def test_round_trip_empty_list():
    t = sexp.parse("()")
    assert repr(t) == "()"


def _sample_tree():
    root = sexp.ListValue()
    root.append(sexp.SymbolValue("define"))
    root.append(sexp.StringValue(b"tab\there\0nul \"quoted\" 'single'?"))
    root.append(sexp.NumberValue(-2.5))
    root.append(sexp.NumberValue(1e20))
    inner = sexp.ListValue()
    inner.append(sexp.ListValue())
    inner.append(sexp.StringValue(""))
    inner.append(sexp.SymbolValue("a.b-c"))
    root.append(inner)
    return root


@pytest.mark.parametrize(
    "value",
    [
        sexp.StringValue(b"a\x00b\x07\x08\x0c\n\r\t\x0b"),
        sexp.SymbolValue("-bla"),
        sexp.NumberValue(123),
        sexp.NumberValue(0.25),
        sexp.ListValue(),
        _sample_tree(),
    ],
)
def test_read_display_round_trip(value):
    text = sexp.display(value)
    result, consumed = sexp.read(text)
    assert result == value
    assert consumed == len(text)
    assert sexp.display(result) == text
