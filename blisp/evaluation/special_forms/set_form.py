from typing import Sequence

from blisp import EvaluatorFn
from blisp.diagnostics import report
from blisp.errors import BlispSyntaxError
from blisp.evaluation.special_forms.arity import check_arity
from blisp.types import Form, Result, Symbol, Environment, Failure


def set_form(
    tail: Sequence[Form],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Result:
    if (failure := check_arity("set!", tail, 2)) is not None:
        return failure

    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        return report(BlispSyntaxError("First argument to set! must be a symbol"))

    value = evaluate_fn(val_expr, env)
    if isinstance(value, Failure):
        return value
    # Append-only: an existing binding in this same scope is left in place
    env.define(var_sym.name, value)
    return value
