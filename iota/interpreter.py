from __future__ import annotations

import logging
from typing import Literal

from iota import SExpression, LispValue
from iota.builtin.env_builtin import register
from iota.evaluation.evaluator import evaluate
from iota.reader.parser import parse, parse_all
from iota.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A session holding one root Environment: primitives plus the bootstrap
    library. Reads and evaluates iota code against it across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: primitives only
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from iota.modules.package_loader import load_prelude
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)
        logger.debug("interpreter ready with %d root bindings", len(self.env.vars))

    def eval_prelude(self, code: str) -> None:
        """Evaluate every form of `code` in the root environment."""
        for expr in parse_all(code):
            evaluate(expr, self.env)

    def evaluate(self, expr: SExpression, env: Environment | None = None) -> LispValue:
        """Evaluate an already-read expression, in the root env unless one is given."""
        return evaluate(expr, self.env if env is None else env)

    def eval(self, code: str) -> LispValue:
        """Read the first form of `code` and evaluate it in the root env."""
        return self.evaluate(parse(code))
