# Core type aliases for blisp.
# Forms are a closed set of frozen dataclasses (see blisp.types). Evaluation
# never raises for language-level errors; it returns a Failure instead.
#
# Naming guidance:
# - Form:    a value of one of the variants in blisp.types (code and data alike).
# - Result:  what reader/evaluator operations hand back: a Form, a Failure,
#            or None when there is nothing to produce.

from typing import Any, Callable

__version__ = "0.1.0"

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., Any]
