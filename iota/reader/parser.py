"""
  Reader: atoms and nested forms from tokens.

Emits Python primitives:

    - integers -> int
    - decimals -> float
    - #t / #f  -> bool
    - "text"   -> StringLiteral
    - names    -> Symbol
    - lists    -> Python list
"""

from __future__ import annotations

from collections import deque
from typing import Iterator

from iota import SExpression
from iota.errors import IotaSyntaxError
from iota.reader.lexer import tokenize
from iota.types.string_literal import StringLiteral
from iota.types.symbol import Symbol

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "#f": False,
}


def _as_int(token: str) -> int | None:
    try:
        value = int(token)
    except ValueError:
        return None
    # Must agree with the float reading, otherwise the token is treated as a float
    return value if float(token) == value else None


def _as_float(token: str) -> float | None:
    # Spellings like inf / nan stay symbols
    if not any(c.isdigit() for c in token):
        return None
    try:
        return float(token)
    except ValueError:
        return None


def atom(token: str) -> SExpression:
    """Classify a single token as a literal or a Symbol."""
    if (i := _as_int(token)) is not None:
        return i
    if (f := _as_float(token)) is not None:
        return f
    if token.lower() in BOOLEANS:
        return BOOLEANS[token.lower()]
    if len(token) >= 2 and token[0] == '"' and token[-1] == '"':
        return StringLiteral(token[1:-1])
    return Symbol(token)


def read(tokens: deque[str]) -> SExpression:
    """Read one form, consuming its tokens from the front of `tokens`."""
    if not tokens:
        raise IotaSyntaxError("unexpected end of input")
    tok = tokens.popleft()
    if tok == "(":
        items = []
        while True:
            if not tokens:
                raise IotaSyntaxError("unexpected end of input")
            if tokens[0] == ")":
                tokens.popleft()
                return items
            items.append(read(tokens))
    if tok == ")":
        raise IotaSyntaxError("unexpected closing parenthesis")
    return atom(tok)


def parse(source: str) -> SExpression:
    """Read the first complete form of `source`; anything after it is ignored."""
    return read(deque(tokenize(source) or ()))


def parse_all(source: str) -> Iterator[SExpression]:
    """Yield every top-level form of `source` in order."""
    tokens = deque(tokenize(source) or ())
    while tokens:
        yield read(tokens)
