from typing import Sequence

from blisp import EvaluatorFn
from blisp.diagnostics import report
from blisp.errors import BlispSyntaxError
from blisp.evaluation.special_forms.arity import check_arity
from blisp.printer import print_form
from blisp.types import Form, Result, ListForm, Function, Environment


def lambda_form(
    tail: Sequence[Form],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Result:
    # (lambda (params...) body)
    if (failure := check_arity("lambda", tail, 2)) is not None:
        return failure

    params, body = tail
    if not isinstance(params, ListForm):
        return report(BlispSyntaxError("First argument to lambda must be a list"))

    # TODO: capture `env` here once functions get real lexical closures;
    # apply() would then open call scopes under it instead of the base env.
    return Function(tuple(print_form(p) for p in params), body)
