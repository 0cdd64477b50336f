"""
  atomlisp Reader: lexer and recursive-descent parser

- Streaming, lazy parsing over a token generator
- Emits the same Python objects the evaluator works on:

    - nil      -> Nil
    - integers -> int (must fit in a signed 64-bit word)
    - symbols  -> Symbol (case-sensitive)
    - lists    -> Python list
    - 'x       -> (quote x)
    - `x       -> (backquote x)
    - ~x       -> (unquote x)
    - ~@x      -> (unquote-splicing x)

Commas count as whitespace; `;` starts a comment running to end of line.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from atomlisp import SExpression
from atomlisp.errors import AtomSyntaxError
from atomlisp.types.nil import Nil
from atomlisp.types.symbol import Symbol
from atomlisp.types.value import in_i64_range


TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<splice>~@)"  # ~@
    r"|(?P<unquote>~)"  # ~
    r"|(?P<quote>')"  # '
    r"|(?P<backquote>`)"  # `
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<atom>[^\s,()'`~;]+)"  # integers, nil and symbols
    r")"
)

SEPARATORS_RE = re.compile(r"[\s,]*")
INTEGER_RE = re.compile(r"-?[0-9]+")

PREFIX_FORMS: dict[str, Symbol] = {
    "quote": Symbol("quote"),
    "backquote": Symbol("backquote"),
    "unquote": Symbol("unquote"),
    "splice": Symbol("unquote-splicing"),
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples, comments dropped."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            # Only trailing separators left
            if SEPARATORS_RE.fullmatch(source, pos):
                return
            raise AtomSyntaxError(f"unexpected character at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.lastgroup == "comment":
            continue
        yield m.lastgroup, m.group(m.lastgroup)


def read_atom(token: str) -> SExpression:
    if token == "nil":
        return Nil
    if INTEGER_RE.fullmatch(token):
        value = int(token)
        if not in_i64_range(value):
            raise AtomSyntaxError(f"integer literal out of range: {token}")
        return value
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        """Parse one complete form. Raises AtomSyntaxError at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise AtomSyntaxError("unexpected end of input")

        if tok_type == "atom":
            return read_atom(tok_val)

        if tok_type in PREFIX_FORMS:
            if self.at_end():
                raise AtomSyntaxError(f"expected a form after {tok_val!r}")
            return [PREFIX_FORMS[tok_type], self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                nxt, _ = self.peek()
                if nxt is None:
                    raise AtomSyntaxError("unmatched '('")
                if nxt == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise AtomSyntaxError("unexpected ')'")

        raise AtomSyntaxError(f"unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(source: str) -> SExpression:
    """Read the first top-level form in `source`."""
    stream = TokenStream(lex(source))
    if stream.at_end():
        raise AtomSyntaxError("no form to read")
    return stream.parse_expr()


def parse_all(source: str) -> Iterator[SExpression]:
    """Read every top-level form in `source`, lazily."""
    return TokenStream(lex(source)).parse_all()
