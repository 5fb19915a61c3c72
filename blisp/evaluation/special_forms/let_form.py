import logging
from typing import Sequence

from blisp import EvaluatorFn
from blisp.diagnostics import report
from blisp.errors import BlispSyntaxError
from blisp.evaluation.special_forms.arity import check_arity
from blisp.printer import print_form
from blisp.types import Form, Result, ListForm, Environment, Failure

logger = logging.getLogger(__name__)


def let_form(
    tail: Sequence[Form],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Result:
    # (let (name expr) body)
    if (failure := check_arity("let", tail, 2)) is not None:
        return failure

    binding, body = tail
    if not isinstance(binding, ListForm):
        return report(BlispSyntaxError("First argument to let must be a list"))
    if len(binding) != 2:
        return report(
            BlispSyntaxError(f"let binding list must have exactly 2 elements, got {len(binding)}")
        )

    name_form, value_expr = binding.elements
    name = print_form(name_form)
    # Value is computed in the calling scope, not the new one
    value = evaluate_fn(value_expr, env)
    if isinstance(value, Failure):
        return value

    let_env = env.child()
    let_env.define(name, value)
    logger.debug("let %s in scope %#x", name, id(let_env))
    return evaluate_fn(body, let_env)
