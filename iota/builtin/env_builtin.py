"""Built-in procedures for the iota root environment.

This module defines arithmetic, comparison, and list primitives, and the
`register` helper that loads them into an Environment. Every primitive takes
the calling environment and the list of evaluated arguments.
"""
from __future__ import annotations

from iota import LispValue
from iota.errors import IotaTypeError, IotaArityError
from iota.types.environment import Environment
from iota.types.string_literal import StringLiteral


def _numbers(name: str, expr: list[LispValue]) -> list[LispValue]:
    """Return `expr` if every argument is a number (booleans excluded)."""
    for x in expr:
        if isinstance(x, bool) or not isinstance(x, (int, float)):
            raise IotaTypeError(f"All arguments to {name} must be numbers")
    return expr


def _exactly(name: str, n: int, expr: list[LispValue]) -> None:
    if len(expr) != n:
        raise IotaArityError(f"{name} requires exactly {n} argument(s)")


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments."""
    return sum(_numbers("+", expr))


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not expr:
        raise IotaArityError("- requires at least 1 argument")
    first, *rest = _numbers("-", expr)
    if not rest:
        return -first
    for x in rest:
        first -= x
    return first


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the product of all arguments."""
    result = 1
    for x in _numbers("*", expr):
        result *= x
    return result


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not expr:
        raise IotaArityError("/ requires at least 1 argument")
    first, *rest = _numbers("/", expr)
    if not rest:
        return 1 / first
    for x in rest:
        first /= x
    return first


# -------------------------------
# Comparison
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Equality for `=`: string literals by text, booleans only with booleans."""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b


def equals(env: Environment, expr: list[LispValue]) -> bool:
    """Return #t if all arguments are equal (or zero/one arg), else #f."""
    return all(is_equal(a, b) for a, b in zip(expr, expr[1:]))


def lt(env: Environment, expr: list[LispValue]) -> bool:
    """Chainable less-than: #t if a0 < a1 < a2 ... holds for all pairs."""
    _numbers("<", expr)
    return all(a < b for a, b in zip(expr, expr[1:]))


def gt(env: Environment, expr: list[LispValue]) -> bool:
    """Chainable greater-than: #t if a0 > a1 > a2 ... holds for all pairs."""
    _numbers(">", expr)
    return all(a > b for a, b in zip(expr, expr[1:]))


def logical_not(env: Environment, expr: list[LispValue]) -> bool:
    """Logical NOT for a single value; only #f is false."""
    _exactly("not", 1, expr)
    return expr[0] is False


# -------------------------------
# Lists
# -------------------------------
def length(env: Environment, expr: list[LispValue]) -> int:
    _exactly("length", 1, expr)
    xs = expr[0]
    if isinstance(xs, StringLiteral):
        return len(xs.value)
    if not isinstance(xs, list):
        raise IotaTypeError(f"length expects a list, got {xs!r}")
    return len(xs)


def car(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the first element of a non-empty list."""
    _exactly("car", 1, expr)
    xs = expr[0]
    if not isinstance(xs, list) or not xs:
        raise IotaTypeError(f"car expects a non-empty list, got {xs!r}")
    return xs[0]


def cdr(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Return a new list of everything after the first element."""
    _exactly("cdr", 1, expr)
    xs = expr[0]
    if not isinstance(xs, list) or not xs:
        raise IotaTypeError(f"cdr expects a non-empty list, got {xs!r}")
    return xs[1:]


def cons(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Return a new list with head prepended to the list tail (non-destructive)."""
    _exactly("cons", 2, expr)
    head, tail = expr
    if not isinstance(tail, list):
        raise IotaTypeError(f"cons expects a list as its second argument, got {tail!r}")
    return [head] + tail


def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    return list(expr)


PRIMITIVES = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    ">": gt,
    "not": logical_not,
    "length": length,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "list": list_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin procedures into the given environment."""
    env.insert(PRIMITIVES)
