from typing import Sequence

from blisp import EvaluatorFn
from blisp.evaluation.special_forms.arity import check_arity
from blisp.types import Form, Result, Environment, Failure, is_truthy


def if_form(
    tail: Sequence[Form],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Result:
    if (failure := check_arity("if", tail, 3)) is not None:
        return failure

    cond_expr, then_expr, else_expr = tail
    cond = evaluate_fn(cond_expr, env)
    if isinstance(cond, Failure):
        return cond

    # Lisp truthiness: anything but nil or false is true
    if is_truthy(cond):
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
