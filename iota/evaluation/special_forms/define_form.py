from iota import EvaluatorFn
from iota import SExpression, LispValue
from iota.errors import IotaSyntaxError
from iota.types.environment import Environment
from iota.types.unspecified import Unspecified


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current scope only, never in an enclosing one.
    """
    if len(tail) != 2:
        raise IotaSyntaxError("define requires exactly 2 arguments")

    name, val_expr = tail
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return Unspecified
