import pytest

from iota.printer import to_text
from iota.reader.parser import parse
from iota.types.string_literal import StringLiteral
from iota.types.symbol import Symbol
from iota.types.unspecified import Unspecified


@pytest.mark.parametrize(
    "value,expected",
    [
        (15, "15"),
        (-3, "-3"),
        (0.0, "0.0"),
        (10.5, "10.5"),
        (True, "#t"),
        (False, "#f"),
        (StringLiteral("hello"), "hello"),
        (Symbol("abc"), "abc"),
        ([], "()"),
        ([Symbol("+"), 1, [2.5, True]], "(+ 1 (2.5 #t))"),
        (Unspecified, "#<unspecified>"),
    ]
)
def test_to_text(value, expected):
    assert to_text(value) == expected


def test_readable_strings_are_quoted():
    assert to_text(StringLiteral("hi"), readable=True) == '"hi"'
    assert to_text([StringLiteral("a"), Symbol("b")], readable=True) == '("a" b)'
    assert to_text([StringLiteral("a"), Symbol("b")]) == "(a b)"


def test_procedures_print_as_placeholder(interp):
    assert to_text(interp.eval("(lambda (x) x)")) == "#<procedure>"
    assert to_text(interp.eval("car")) == "#<procedure>"
    assert to_text(interp.eval("(list car 1)")) == "(#<procedure> 1)"


@pytest.mark.parametrize(
    "source",
    [
        "(quote (1 2.5 #t #f (nested (list)) sym))",
        "(quote ())",
        '(quote ("s" x))',
    ]
)
def test_quoted_data_round_trips(interp, source):
    value = interp.eval(source)
    assert parse(to_text(value, readable=True)) == value


def test_quoted_leaf_prints_its_text(interp):
    assert to_text(interp.eval("(quote asdfg)")) == "asdfg"
