"""Diagnostic sink for blisp.

Errors are reported exactly once, at the point where they are detected: the
detecting code calls `report`, which writes the message to the current sink
and hands back a Failure for the caller to propagate.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from blisp.errors import BlispError
from blisp.runtime_context import get_diagnostics
from blisp.types.result import Failure

logger = logging.getLogger(__name__)


class DiagnosticSink:
    """Writes one human-readable line per diagnostic to a text stream."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so a replaced sys.stdout (pytest capsys) is honoured
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, error: BlispError) -> None:
        self.stream.write(f"{error}\n")
        self.stream.flush()


class CollectingSink(DiagnosticSink):
    """Sink that records every error; optionally echoes to a stream."""

    def __init__(self, stream: TextIO | None = None):
        super().__init__(stream)
        self.errors: list[BlispError] = []

    @property
    def messages(self) -> list[str]:
        return [str(e) for e in self.errors]

    def emit(self, error: BlispError) -> None:
        self.errors.append(error)
        if self._stream is not None:
            super().emit(error)

    def clear(self) -> None:
        self.errors.clear()


def report(error: BlispError) -> Failure:
    """Emit `error` to the current diagnostic sink and wrap it as a Failure."""
    logger.debug("reporting %s: %s", type(error).__name__, error)
    get_diagnostics().emit(error)
    return Failure(error)
