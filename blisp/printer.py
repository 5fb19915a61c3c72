"""Canonical printed representation of forms.

`print_form` is the redisplay used by the REPL: reading its output back
yields a form that prints identically.
"""

from __future__ import annotations

from io import StringIO

from blisp.types import (
    Form,
    NilType,
    Boolean,
    Number,
    String,
    Symbol,
    ListForm,
    Function,
    BuiltinFunction,
)

_ESCAPES = {
    "\n": "\\n",
    "\\": "\\\\",
    '"': '\\"',
}


def escape(text: str) -> str:
    """Inverse of the reader's string decoding: newline, backslash and quote."""
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def print_form(form: Form) -> str:
    match form:
        case NilType():
            return "nil"
        case Boolean(value):
            return "true" if value else "false"
        case Number(value):
            return str(value)
        case String(value):
            return f'"{escape(value)}"'
        case Symbol(name):
            return name
        case ListForm(elements):
            with StringIO() as buffer:
                buffer.write("(")
                buffer.write(" ".join(print_form(e) for e in elements))
                buffer.write(")")
                return buffer.getvalue()
        case BuiltinFunction():
            return "<builtin function>"
        case Function():
            return "<function>"
    raise TypeError(f"Not a blisp form: {form!r}")
