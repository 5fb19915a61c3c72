import logging
import sys

from blisp.config import get_log_level
from blisp.diagnostics import DiagnosticSink
from blisp.interpreter import Interpreter
from blisp.runtime_context import set_diagnostics


def main() -> int:
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    set_diagnostics(DiagnosticSink(sys.stdout))
    try:
        Interpreter().repl(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        pass
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
