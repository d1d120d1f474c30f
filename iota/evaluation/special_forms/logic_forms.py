from iota import SExpression, LispValue, EvaluatorFn
from iota.types.environment import Environment


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until #f is found,
    which is returned immediately. If every operand is true, returns the value
    of the last operand. With zero operands, returns #t.
    """
    result: LispValue = True
    for expr in tail:
        result = evaluate_fn(expr, env)
        if result is False:
            return False
    return result


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    value that is not #f. If there is none, or no operands, returns #f.
    """
    for expr in tail:
        val = evaluate_fn(expr, env)
        if val is not False:
            return val
    return False
