"""Special form: cond, the multi-branch conditional."""

from iota import SExpression, LispValue, EvaluatorFn
from iota.errors import IotaSyntaxError
from iota.types.environment import Environment
from iota.types.symbol import Symbol
from iota.types.unspecified import Unspecified

ELSE = Symbol("else")


def _check_clauses(tail: list[SExpression]) -> None:
    last = len(tail) - 1
    for idx, clause in enumerate(tail):
        if not isinstance(clause, list) or len(clause) < 2:
            raise IotaSyntaxError(f"cond clause must be (test expr...), got {clause!r}")
        if clause[0] == ELSE and idx != last:
            raise IotaSyntaxError("else is only allowed in the last cond clause")


def cond_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate a (cond (test expr...) ...).

    Clauses are checked up front, then tried in order: the first test that is
    not #f has its expressions evaluated and the last value returned. `else`
    as the final test always matches. If nothing matches the result is
    Unspecified.
    """
    _check_clauses(tail)

    for test, *body in tail:
        if test != ELSE and evaluate_fn(test, env) is False:
            continue
        result: LispValue = Unspecified
        for expr in body:
            result = evaluate_fn(expr, env)
        return result

    return Unspecified
