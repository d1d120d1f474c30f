"""Core tree-walking evaluator for the iota interpreter.

Dispatches on the shape of the expression: symbols are looked up, lists
headed by a special-form keyword go to their handler, other lists are
procedure applications, and everything else evaluates to itself.
"""

from __future__ import annotations

from iota import SExpression, LispValue
from iota.evaluation.apply import apply
from iota.evaluation.special_forms import SPECIAL_FORMS
from iota.types.environment import Environment
from iota.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case []:
            return []

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)

        case [head, *tail]:
            proc = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail]
            return apply(proc, args, env, evaluate)

    # --- Atoms return as-is ---
    return expr
