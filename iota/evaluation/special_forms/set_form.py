from iota import EvaluatorFn
from iota import SExpression, LispValue
from iota.errors import IotaSyntaxError
from iota.types.environment import Environment
from iota.types.symbol import Symbol
from iota.types.unspecified import Unspecified


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise IotaSyntaxError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise IotaSyntaxError(f"set! first argument must be a symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return Unspecified
