"""The blisp form model.

`Form` is a closed union; the evaluator and printer dispatch over it with
`match`. Every variant is immutable once constructed.
"""

from __future__ import annotations

from typing import Optional, Union

from blisp.types.nil import NilType, Nil
from blisp.types.boolean import Boolean, TRUE, FALSE
from blisp.types.atoms import Number, String, NUMBER_MIN, NUMBER_MAX, in_number_range
from blisp.types.symbol import Symbol
from blisp.types.list_form import ListForm
from blisp.types.lambda_fn import Function, BuiltinFunction
from blisp.types.environment import Environment
from blisp.types.result import Failure

Form = Union[NilType, Boolean, Number, String, Symbol, ListForm, Function, BuiltinFunction]

# What readers and evaluators hand back: a form, a reported failure, or nothing.
Result = Optional[Union[Form, Failure]]


def is_truthy(form: Form) -> bool:
    """Only Nil and false are falsy."""
    return not (form is Nil or form == FALSE)


__all__ = [
    "Form",
    "Result",
    "NilType",
    "Nil",
    "Boolean",
    "TRUE",
    "FALSE",
    "Number",
    "String",
    "NUMBER_MIN",
    "NUMBER_MAX",
    "in_number_range",
    "Symbol",
    "ListForm",
    "Function",
    "BuiltinFunction",
    "Environment",
    "Failure",
    "is_truthy",
]
