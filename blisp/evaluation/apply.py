"""Application engine for blisp.

Both user Functions and BuiltinFunctions are applied the same way:
- the number of argument expressions must equal the parameter count;
- arguments are evaluated eagerly, left to right, in the caller's environment,
  and the first Failure aborts the whole application;
- a fresh scope is opened under the base environment and each parameter is
  bound to its argument;
- a Function's body is then evaluated in that scope, while a BuiltinFunction
  runs its Python computation against it.

Functions capture no defining environment, so the base environment stands in
for it: a body never sees the caller's locals nor those visible where the
lambda was written.
"""

from __future__ import annotations

import logging
from typing import Sequence

from blisp import EvaluatorFn
from blisp.diagnostics import report
from blisp.errors import BlispArityError
from blisp.types import Form, Result, Function, BuiltinFunction, Environment, Failure

logger = logging.getLogger(__name__)


def bind_arguments(params: Sequence[str], args: Sequence[Form], outer: Environment) -> Environment:
    """Open a scope under `outer` binding each parameter to its argument."""
    call_env = outer.child()
    for name, value in zip(params, args):
        call_env.define(name, value)
    return call_env


def apply(
    fn: Function | BuiltinFunction,
    arg_exprs: Sequence[Form],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Result:
    if len(arg_exprs) != fn.arity:
        return report(
            BlispArityError(
                f"Not enough arguments to function, expecting {fn.arity}, got {len(arg_exprs)}"
            )
        )

    args: list[Form] = []
    for expr in arg_exprs:
        value = evaluate_fn(expr, env)
        if isinstance(value, Failure):
            return value
        args.append(value)

    call_env = bind_arguments(fn.params, args, env.root())
    logger.debug("applying %r to %d argument(s)", fn, len(args))

    if isinstance(fn, BuiltinFunction):
        return fn.compute(call_env)
    return evaluate_fn(fn.body, call_env)
