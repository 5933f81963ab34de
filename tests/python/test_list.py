import pytest

import sexp


def test_list():
    assert not sexp.is_list(None)
    lst = sexp.ListValue()
    assert sexp.is_list(lst)
    assert lst.is_list()
    assert lst.kind is sexp.ValueKind.LIST
    assert len(lst) == 0


def test_append_returns_list():
    lst = sexp.ListValue()
    assert lst.append(sexp.NumberValue(1)) is lst


def test_append_across_growth():
    lst = sexp.ListValue()
    for i in range(1, 5):
        lst = lst.append(sexp.NumberValue(i))
    assert len(lst) == 4
    assert [lst.nth(i).value for i in range(4)] == [1, 2, 3, 4]
    for i in range(5, 8):
        lst = lst.append(sexp.NumberValue(i))
    assert len(lst) == 7
    assert [lst.nth(i).value for i in range(7)] == [1, 2, 3, 4, 5, 6, 7]


def test_append_non_value_raises():
    with pytest.raises(TypeError):
        sexp.ListValue().append("not a value")


def test_append_owned_value_raises():
    first = sexp.ListValue()
    second = sexp.ListValue()
    sym = sexp.SymbolValue("x")
    first.append(sym)
    with pytest.raises(ValueError):
        second.append(sym)
    assert len(second) == 0


def test_append_self_raises():
    lst = sexp.ListValue()
    with pytest.raises(ValueError):
        lst.append(lst)


def test_append_ancestor_raises():
    root = sexp.ListValue()
    child = sexp.ListValue()
    root.append(child)
    with pytest.raises(ValueError):
        child.append(root)


def test_append_none_placeholder():
    lst = sexp.ListValue()
    lst.append(None)
    assert len(lst) == 1
    assert lst.nth(0) is None


def test_list_equality():
    a = sexp.parse("(1 (x) \"s\")")
    b = sexp.parse("(1 (x) \"s\")")
    c = sexp.parse("(1 (y) \"s\")")
    assert a == b
    assert a != c
    assert a != sexp.parse("(1 (x))")


def test_list_is_unhashable():
    with pytest.raises(TypeError):
        hash(sexp.ListValue())


def test_value_cannot_be_subclassed():
    with pytest.raises(TypeError):
        class Extra(sexp.Value):
            pass
