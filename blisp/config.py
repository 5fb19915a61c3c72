from __future__ import annotations
import logging
import os


_DEFAULT_PROMPT = "blisp> "
_DEFAULT_LOG_LEVEL = "WARNING"


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw


def get_prompt() -> str:
    return str_from_env('BLISP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = str_from_env('BLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING
