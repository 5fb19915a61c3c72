from __future__ import annotations
from dataclasses import dataclass

from blisp.errors import BlispError


@dataclass(frozen=True, slots=True)
class Failure:
    """The absence of a result. The error has already been reported once."""

    error: BlispError

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return str(self.error)
