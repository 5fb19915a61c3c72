"""
  blisp Reader: Lexer and Parser

- One line in, at most one form out.
- The lexer is a single regular-expression pass; characters it cannot
  match are dropped, so lexing never fails.
- The parser is recursive descent over a TokenStream and reports errors
  as Failures rather than raising:

    - ()          -> Nil
    - (a b ...)   -> ListForm
    - "..."       -> String (escapes decoded once)
    - 123         -> Number
    - true/false  -> Boolean
    - ; comment   -> no form
    - other atoms -> Symbol
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from blisp.diagnostics import report
from blisp.errors import BlispReadError, BlispDomainError
from blisp.types import (
    Form,
    Result,
    Nil,
    TRUE,
    FALSE,
    Number,
    String,
    Symbol,
    ListForm,
    Failure,
    in_number_range,
)

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"[\s,]*("
    r"~@"  # splice-unquote marker
    r"|[\[\]{}()~^'`]"  # single structural characters
    r'|"(?:\\.|[^\\"])*"'  # double-quoted string, delimiters included
    r"|;.*"  # comment to end of line
    r'|[^\s\[\]{}();,^\'`"\\]+'  # atom; a stray backslash is dropped
    r")"
)

_DIGITS = "0123456789"
_DIGITS_RE = re.compile(r"[0-9]+")

# Escapes recognised inside string literals; anything else passes through.
_UNESCAPES = {"n": "\n"}


def lex(source: str) -> list[str]:
    """Split one line of source into tokens, left to right."""
    return [m.group(1) for m in TOKEN_RE.finditer(source)]


def unescape(body: str) -> str:
    """Decode backslash escapes in the text between a string's quotes."""
    out: list[str] = []
    chars = iter(body)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, "")
            out.append(_UNESCAPES.get(nxt, nxt))
        else:
            out.append(ch)
    return "".join(out)


class TokenStream:
    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.pos = 0

    def empty(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Optional[str]:
        if self.empty():
            return None
        return self.tokens[self.pos]

    def advance(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def parse_expr(self) -> Result:
        """Read one form. Returns None at end of input or for a comment."""
        tok = self.peek()
        if tok is None:
            return None
        if tok[0] == "(":
            return self.parse_list()
        return self.parse_atom()

    def parse_list(self) -> Result:
        self.advance()  # consume the open paren
        items: list[Form] = []
        while True:
            tok = self.peek()
            if tok is None:
                return report(BlispReadError("Error: unterminated read (list)"))
            if tok[0] == ")":
                self.advance()
                break
            item = self.parse_expr()
            if isinstance(item, Failure):
                return item
            if item is not None:  # comments produce nothing
                items.append(item)
        if not items:
            return Nil
        return ListForm(tuple(items))

    def parse_atom(self) -> Result:
        tok = self.advance()
        first = tok[0]
        if first == '"':
            return String(unescape(tok[1:-1]))
        if first in _DIGITS:
            return self.parse_number(tok)
        if tok == "true":
            return TRUE
        if tok == "false":
            return FALSE
        if first == ";":
            logger.debug("skipping comment %r", tok)
            return None
        return Symbol(tok)

    @staticmethod
    def parse_number(tok: str) -> Result:
        # Like the classic stoi: the leading run of digits is the value.
        value = int(_DIGITS_RE.match(tok).group(0))
        if not in_number_range(value):
            return report(BlispReadError(f"Error: number out of range: {tok}"))
        return Number(value)


def read(source: str) -> Result:
    """Read the first form on a line; trailing tokens are ignored."""
    stream = TokenStream(lex(source))
    try:
        return stream.parse_expr()
    except RecursionError:
        return report(BlispDomainError("Error: recursion depth exceeded"))
