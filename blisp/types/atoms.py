"""Self-evaluating scalar forms: integers and strings."""

from __future__ import annotations
from dataclasses import dataclass

# Numbers are signed 64-bit; anything outside is a read or domain error.
NUMBER_MIN = -(2 ** 63)
NUMBER_MAX = 2 ** 63 - 1


def in_number_range(value: int) -> bool:
    return NUMBER_MIN <= value <= NUMBER_MAX


@dataclass(frozen=True, slots=True)
class Number:
    value: int

    def __repr__(self):
        return f"Number({self.value})"


@dataclass(frozen=True, slots=True)
class String:
    """A string form. `value` holds the decoded characters (escapes already applied)."""

    value: str

    def __repr__(self):
        return f"String({self.value!r})"
