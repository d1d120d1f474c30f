from iota import EvaluatorFn
from iota import SExpression, LispValue
from iota.types.environment import Environment
from iota.types.unspecified import Unspecified


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Unspecified
    for e in tail:
        result = evaluate_fn(e, env)
    return result
