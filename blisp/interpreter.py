from __future__ import annotations

import logging
from typing import TextIO

from blisp.builtin.env_builtin import create_base_env
from blisp.config import get_prompt
from blisp.evaluation.evaluator import evaluate
from blisp.printer import print_form
from blisp.reader import read
from blisp.types import Result, Environment, Failure

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads, evaluates and prints blisp one line at a time.
    Owns the base environment, so bindings made with set! persist across lines.
    """

    def __init__(self, env: Environment | None = None, prompt: str | None = None):
        self.env: Environment = env if env is not None else create_base_env()
        self.prompt: str = prompt if prompt is not None else get_prompt()

    def eval(self, line: str) -> Result:
        """Read the first form on `line` and evaluate it in the base environment."""
        form = read(line)
        if isinstance(form, Failure):
            return form
        return evaluate(form, self.env)

    def rep(self, line: str) -> str | None:
        """Read-eval-print one line; None when the line produces no result."""
        result = self.eval(line)
        if result is None or isinstance(result, Failure):
            return None
        return print_form(result)

    def repl(self, stdin: TextIO, stdout: TextIO) -> None:
        """Loop until end of input. A failing line never stops the loop."""
        while True:
            stdout.write(self.prompt)
            stdout.flush()
            line = stdin.readline()
            if not line:
                break
            printed = self.rep(line.rstrip("\n"))
            if printed is not None:
                stdout.write(printed + "\n")
        logger.debug("end of input")
