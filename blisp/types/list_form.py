from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from blisp.types import Form


@dataclass(frozen=True, slots=True)
class ListForm:
    """A non-empty parenthesised form. The reader folds `()` to Nil instead."""

    elements: tuple[Form, ...]

    @property
    def head(self) -> Form:
        return self.elements[0]

    @property
    def tail(self) -> tuple[Form, ...]:
        return self.elements[1:]

    def __len__(self) -> int:
        return len(self.elements)

    def __bool__(self) -> bool:
        # A list form is a value; it is never falsy, even if built empty.
        return True

    def __iter__(self) -> Iterator[Form]:
        return iter(self.elements)

    def __repr__(self):
        return f"ListForm({list(self.elements)!r})"
