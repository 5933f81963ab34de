import math

import pytest

import sexp


def test_number():
    assert not sexp.is_number(None)
    e = sexp.NumberValue(1.5)
    assert sexp.is_number(e)
    assert e.is_number()
    assert e.kind is sexp.ValueKind.NUMBER
    assert e.value == 1.5


def test_number_from_int_is_float():
    e = sexp.NumberValue(3)
    assert type(e.value) is float
    assert e.value == 3.0


def test_number_rejects_non_numbers():
    with pytest.raises(TypeError):
        sexp.NumberValue("1")
    with pytest.raises(TypeError):
        sexp.NumberValue(True)


def test_number_equality_is_bitwise():
    assert sexp.NumberValue(1.0) == sexp.NumberValue(1)
    assert sexp.NumberValue(0.0) != sexp.NumberValue(-0.0)
    assert sexp.NumberValue(math.nan) == sexp.NumberValue(math.nan)


def test_number_is_hashable():
    assert len({sexp.NumberValue(1), sexp.NumberValue(1.0)}) == 1
