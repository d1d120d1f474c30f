from iota import EvaluatorFn
from iota import SExpression, LispValue
from iota.errors import IotaSyntaxError
from iota.types.environment import Environment
from iota.types.symbol import Symbol
from iota.types.unspecified import Unspecified


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((name expr) ...) body...)
    Initialisers are evaluated in the enclosing scope; the body runs in a new
    child scope, so none of the names are visible afterwards.
    """
    if not tail or not isinstance(tail[0], list):
        raise IotaSyntaxError("let requires a binding list")

    bindings, body = tail[0], tail[1:]
    values: dict[Symbol, LispValue] = {}
    for binding in bindings:
        if not (isinstance(binding, list) and len(binding) == 2 and isinstance(binding[0], Symbol)):
            raise IotaSyntaxError(f"let binding must be (name expr), got {binding!r}")
        name, init = binding
        values[name] = evaluate_fn(init, env)

    local_env = Environment(outer=env)
    local_env.insert(values)

    result: LispValue = Unspecified
    for expr in body:
        result = evaluate_fn(expr, local_env)
    return result
