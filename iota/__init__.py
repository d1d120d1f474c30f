# Core type aliases for iota's data model.
# Plain Python types (int, float, bool, list) represent both code and runtime
# values; Symbol and StringLiteral keep identifiers apart from quoted text.
#
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:   use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable, since code is data.

import logging
from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]

logging.getLogger(__name__).addHandler(logging.NullHandler())
