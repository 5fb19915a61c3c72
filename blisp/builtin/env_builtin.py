"""Built-in functions for the blisp base environment.

Defines the two-parameter integer arithmetic operators and the registration
utilities that build the base environment.
"""
from __future__ import annotations

import operator
from functools import partial
from typing import Callable

from blisp.diagnostics import report
from blisp.errors import BlispTypeError, BlispDomainError
from blisp.printer import print_form
from blisp.types import (
    Result,
    Nil,
    Number,
    BuiltinFunction,
    Environment,
    in_number_range,
)

# Every arithmetic builtin takes exactly these parameters
PARAMS = ("a", "b")

IntOp = Callable[[int, int], int]


def truncating_div(a: int, b: int) -> int:
    """Integer quotient rounded toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def truncating_mod(a: int, b: int) -> int:
    """Remainder matching truncating_div; takes the sign of the dividend."""
    return a - b * truncating_div(a, b)


def _describe(value) -> str:
    return "nothing" if value is None else print_form(value)


def numeric(verb: str, op: IntOp, env: Environment, *, checks_divisor: bool = False) -> Result:
    """Fetch `a` and `b` from the call scope and combine them with `op`."""
    a = env.lookup("a")
    b = env.lookup("b")
    if not isinstance(a, Number) or not isinstance(b, Number):
        return report(BlispTypeError(f"Don't know how to {verb} {_describe(a)} and {_describe(b)}"))

    if checks_divisor and b.value == 0:
        return report(BlispDomainError("Division by zero"))

    result = op(a.value, b.value)
    if not in_number_range(result):
        return report(BlispDomainError(f"Integer overflow: cannot {verb} {a.value} and {b.value}"))
    return Number(result)


# symbol -> (verb used in diagnostics, operation, divisor must be nonzero)
ARITHMETIC: dict[str, tuple[str, IntOp, bool]] = {
    "+": ("add", operator.add, False),
    "-": ("subtract", operator.sub, False),
    "*": ("multiply", operator.mul, False),
    "/": ("divide", truncating_div, True),
    "%": ("mod", truncating_mod, True),
}


def make_builtin(symbol: str) -> BuiltinFunction:
    verb, op, checks_divisor = ARITHMETIC[symbol]
    return BuiltinFunction(
        PARAMS,
        partial(numeric, verb, op, checks_divisor=checks_divisor),
        symbol,
    )


def register(env: Environment) -> None:
    """Populate `env` with nil and the arithmetic builtins."""
    env.define("nil", Nil)
    for symbol in ARITHMETIC:
        env.define(symbol, make_builtin(symbol))


def create_base_env() -> Environment:
    """Build a fresh, unparented base environment."""
    env = Environment()
    register(env)
    return env
