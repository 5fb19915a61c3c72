"""Core evaluator for the blisp interpreter.

Dispatches on the form variant. Lists whose head is literally one of the
special-form symbols are handed to the matching handler; any other list is a
function application. Errors are reported where they are detected and come
back as a Failure, which every caller propagates unchanged.
"""

from __future__ import annotations

import logging

from blisp.diagnostics import report
from blisp.errors import BlispUnboundSymbol, BlispTypeError, BlispDomainError
from blisp.evaluation.apply import apply
from blisp.evaluation.special_forms import SPECIAL_FORMS
from blisp.printer import print_form
from blisp.types import (
    Result,
    NilType,
    Boolean,
    Number,
    String,
    Symbol,
    ListForm,
    Function,
    BuiltinFunction,
    Environment,
    Failure,
)

logger = logging.getLogger(__name__)


def evaluate(form: Result, env: Environment) -> Result:
    """Evaluate `form` in `env`. No form in, no form out.

    Entry point for callers outside the evaluator. Nesting or recursion too
    deep for the Python stack is reported as a Failure like any other error.
    """
    try:
        return evaluate0(form, env)
    except RecursionError:
        return report(BlispDomainError("Error: recursion depth exceeded"))


def evaluate0(form: Result, env: Environment) -> Result:
    """Core evaluator: single-step dispatch on the form variant."""
    match form:
        case None:
            return None
        case Failure():
            return form
        case Symbol(name):
            value = env.lookup(name)
            if value is None:
                return report(BlispUnboundSymbol(f"Unbound symbol: {name}"))
            return value
        case ListForm():
            return evaluate_list(form, env)
        # --- Atoms and functions evaluate to themselves ---
        case NilType() | Boolean() | Number() | String() | Function() | BuiltinFunction():
            return form
    raise TypeError(f"Not a blisp form: {form!r}")


def evaluate_list(form: ListForm, env: Environment) -> Result:
    if len(form) == 0:
        return report(BlispTypeError("Don't know how to evaluate ()"))

    head = form.head
    # Special forms are keyed on the literal head symbol, never on a binding.
    if isinstance(head, Symbol) and head in SPECIAL_FORMS:
        logger.debug("special form %s", head)
        return SPECIAL_FORMS[head](form.tail, env, evaluate0)

    fn = evaluate0(head, env)
    if isinstance(fn, Failure):
        return fn
    if isinstance(fn, (Function, BuiltinFunction)):
        return apply(fn, form.tail, env, evaluate0)

    return report(BlispTypeError(f"Don't know how to evaluate {print_form(head)}"))
