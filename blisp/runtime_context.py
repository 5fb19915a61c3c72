from __future__ import annotations
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from blisp.diagnostics import DiagnosticSink

# NOTE: For now this is process-global. If threading is introduced,
# consider switching to contextvars or threading.local.
_current_diagnostics: Optional["DiagnosticSink"] = None


def set_diagnostics(sink: Optional["DiagnosticSink"]) -> Optional["DiagnosticSink"]:
    """Install `sink` as the process-wide diagnostic sink; return the previous one."""
    global _current_diagnostics
    previous = _current_diagnostics
    _current_diagnostics = sink
    return previous


def get_diagnostics() -> "DiagnosticSink":
    global _current_diagnostics
    if _current_diagnostics is None:
        from blisp.diagnostics import DiagnosticSink
        _current_diagnostics = DiagnosticSink()
    return _current_diagnostics
