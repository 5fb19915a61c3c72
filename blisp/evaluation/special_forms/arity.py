from __future__ import annotations

from typing import Optional, Sequence

from blisp.diagnostics import report
from blisp.errors import BlispArityError
from blisp.types import Form, Failure


def check_arity(keyword: str, tail: Sequence[Form], expected: int) -> Optional[Failure]:
    """Report and return a Failure unless `tail` has exactly `expected` operands."""
    if len(tail) != expected:
        return report(
            BlispArityError(
                f"Wrong number of arguments to {keyword}, expecting {expected}, got {len(tail)}"
            )
        )
    return None
