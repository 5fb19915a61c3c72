"""Runtime environment for blisp.

The Environment stores bindings of names to forms and supports nested scopes
via an `outer` link. Scopes form a strict chain ending at the base
environment, the only scope without a parent.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from blisp.types import Form

logger = logging.getLogger(__name__)


class Environment:
    """Hierarchical mapping from names to forms."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Form] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: Form) -> bool:
        """Bind `name` to `value` in this scope.

        Insertion is append-only: if `name` is already bound in this same
        scope the existing value is kept and False is returned. Bindings in
        outer scopes are shadowed, never touched.
        """
        if name in self.vars:
            logger.debug("ignoring rebinding of %r in scope %#x", name, id(self))
            return False
        self.vars[name] = value
        return True

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> Optional[Form]:
        """Look up the value bound to `name`, innermost scope first.

        Returns None when the name is unbound anywhere in the chain; reporting
        that is the evaluator's job.
        """
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def root(self) -> Environment:
        """Return the base (unparented) environment of this chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def child(self) -> Environment:
        """Create a fresh scope whose parent is this environment."""
        return Environment(outer=self)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
