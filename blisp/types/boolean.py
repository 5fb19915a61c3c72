from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool

    def __bool__(self) -> bool:
        return self.value

    def __repr__(self):
        return "true" if self.value else "false"


TRUE = Boolean(True)
FALSE = Boolean(False)
