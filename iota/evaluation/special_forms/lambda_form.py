from iota import EvaluatorFn
from iota import SExpression, LispValue
from iota.errors import IotaSyntaxError
from iota.types.environment import Environment
from iota.types.lambda_fn import Lambda
from iota.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) with several body forms is an implicit begin.
    if len(tail) < 2:
        raise IotaSyntaxError("lambda requires a parameter list and a body")

    params = tail[0]
    body_forms = tail[1:]

    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise IotaSyntaxError(f"lambda parameters must be a list of symbols, got {params!r}")

    if len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = [Symbol("begin"), *body_forms]

    return Lambda(list(params), body, env)
