"""Closure representation and argument binding for iota."""

from __future__ import annotations

import logging

from iota import SExpression, LispValue
from iota.config import strict_arity
from iota.errors import IotaArityError
from iota.types.environment import Environment
from iota.types.symbol import Symbol
from iota.types.unspecified import Unspecified

logger = logging.getLogger(__name__)


class Lambda:
    """A first-class closure: formal parameters, body, and the defining env.

    The captured env is shared by reference with the defining scope and with
    any other closure created there; calls never mutate it directly.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    def __repr__(self) -> str:
        return f"<Lambda ({' '.join(str(f) for f in self.formals)})>"

    # Copies keep sharing the captured scope
    def __copy__(self): return self

    def __deepcopy__(self, memo): return self

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to the formal parameters and return a
        new Environment, parented to the captured env, for evaluating the body.
        """
        if len(args) != len(self.formals):
            if strict_arity():
                raise IotaArityError(
                    f"{self!r} expects {len(self.formals)} argument(s), got {len(args)}"
                )
            logger.debug(
                "lax arity: %r called with %d argument(s)", self, len(args)
            )
        new_env = Environment(outer=self.env)
        for i, name in enumerate(self.formals):
            new_env.define(name, args[i] if i < len(args) else Unspecified)
        return new_env
