"""Function representations for blisp: user lambdas and native builtins."""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from blisp.types import Form, Result
    from blisp.types.environment import Environment


@dataclass(frozen=True, slots=True)
class Function:
    """A user-defined function: parameter names plus one unevaluated body form.

    No defining environment is captured. The body runs in a fresh scope whose
    parent is the base environment, so it sees only its own parameters and
    the base bindings.
    """

    params: tuple[str, ...]
    body: Form

    @property
    def arity(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        from blisp.printer import print_form

        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.params))
            buffer.write(") ")
            buffer.write(print_form(self.body))
            buffer.write(")")
            return buffer.getvalue()


@dataclass(frozen=True, slots=True)
class BuiltinFunction:
    """A function whose body is a Python callable.

    `compute` receives the call environment, in which every name in `params`
    is bound to its evaluated argument, and returns a form or a Failure.
    """

    params: tuple[str, ...]
    compute: Callable[[Environment], Result] = field(compare=False)
    name: str = ""

    @property
    def arity(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        return f"<builtin {self.name or '?'} ({' '.join(self.params)})>"
