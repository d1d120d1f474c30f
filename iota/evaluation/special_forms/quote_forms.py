import copy

from iota import SExpression, LispValue, EvaluatorFn
from iota.errors import IotaSyntaxError
from iota.printer import to_text
from iota.types.environment import Environment
from iota.types.string_literal import StringLiteral


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (quote datum)
    A quoted list comes back as fresh data; a quoted leaf comes back as the
    string literal of its printed form.
    """
    if len(tail) != 1:
        raise IotaSyntaxError("quote expects exactly 1 argument")
    datum = tail[0]
    if isinstance(datum, list):
        return copy.deepcopy(datum)
    return StringLiteral(to_text(datum))
