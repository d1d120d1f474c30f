from iota import EvaluatorFn
from iota import SExpression, LispValue
from iota.errors import IotaSyntaxError
from iota.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise IotaSyntaxError("if requires a test, a consequent and an alternative")

    test, conseq, alt = tail
    # Only #f is false
    if evaluate_fn(test, env) is not False:
        return evaluate_fn(conseq, env)
    return evaluate_fn(alt, env)
