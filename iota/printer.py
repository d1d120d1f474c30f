"""Render iota values back to Scheme-like surface syntax."""

from __future__ import annotations

from iota import LispValue
from iota.types.lambda_fn import Lambda
from iota.types.string_literal import StringLiteral
from iota.types.symbol import Symbol
from iota.types.unspecified import UnspecifiedType

PROCEDURE_PLACEHOLDER = "#<procedure>"


def to_text(obj: LispValue, readable: bool = False) -> str:
    """Return the textual form of `obj`.

    String literals print as their raw text; with `readable=True` they are
    wrapped in double quotes so the output reads back as the same value.
    """
    # bool before int: True/False are ints in Python
    if isinstance(obj, bool):
        return "#t" if obj else "#f"
    if isinstance(obj, list):
        return "(" + " ".join(to_text(x, readable) for x in obj) + ")"
    if isinstance(obj, StringLiteral):
        return f'"{obj.value}"' if readable else obj.value
    if isinstance(obj, Symbol):
        return obj.name
    if isinstance(obj, float):
        return repr(obj)
    if isinstance(obj, UnspecifiedType):
        return repr(obj)
    if isinstance(obj, Lambda) or callable(obj):
        return PROCEDURE_PLACEHOLDER
    return str(obj)
