"""Application engine for iota.

Closures evaluate their body in a fresh scope parented to the scope they were
defined in (lexical scoping). Native procedures are Python callables invoked
as `fn(env, args)`; host faults they raise are reported as IotaRuntimeError.
"""

import logging
from typing import Callable

from iota import LispValue, EvaluatorFn
from iota.errors import IotaRuntimeError, IotaTypeError
from iota.printer import to_text
from iota.types.environment import Environment
from iota.types.lambda_fn import Lambda

logger = logging.getLogger(__name__)

# Faults a native procedure may raise on bad operands
HOST_FAULTS = (TypeError, ValueError, AttributeError, ArithmeticError, LookupError)


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a closure to already-evaluated arguments."""
    return evaluate_fn(fn.body, fn.extend_env(args))


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Python callable.

    - For Lambda, defer to apply_lambda.
    - For Python callables (primitives), invoke with the caller env and args.
    - Otherwise, raise a type error.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        try:
            return head(env, args)
        except HOST_FAULTS as ex:
            logger.debug("host fault in %r: %r", head, ex)
            raise IotaRuntimeError(
                f"{getattr(head, '__name__', head)}: {ex}"
            ) from ex
    else:
        raise IotaTypeError(f"Cannot apply non-procedure {to_text(head, readable=True)}")
