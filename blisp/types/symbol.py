from __future__ import annotations
import sys
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Symbol:
    name: str

    def __post_init__(self):
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "name", sys.intern(self.name))

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
