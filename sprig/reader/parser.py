"""
  Lisp Reader, Lexer and Parser

- Streaming lexer, recursive-descent parser
- Emits Cells directly:

    - lists -> ListCell (empty `()` -> empty ListCell)
    - decimal numbers -> Number
    - #t / #f -> Bool
    - strings -> Str
    - 'expr -> Quoted(expr)
    - anything else -> Atom
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from sprig import SExpression
from sprig.errors import SprigSyntaxError, SprigUnmatchedParen
from sprig.types.cell import Atom, Bool, Number, Quoted, Str, new_list


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

BOOLEANS = {"#t": True, "#f": False}


@dataclass
class Program:
    """Parsed source: the trimmed text and its single root expression."""

    text: str
    entry: Optional[SExpression]


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise SprigSyntaxError(f"Unterminated string at {pos}")
            raise SprigSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("quote", "lparen", "rparen", "string", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


def parse_atom(token: str) -> SExpression:
    """Classify a bare token as Number, Bool or Atom."""
    if NUMBER_RE.fullmatch(token):
        return Number(float(token))
    if token in BOOLEANS:
        return Bool(BOOLEANS[token])
    return Atom(token)


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

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return parse_atom(tok_val)

        if tok_type == "quote":
            self.advance()
            if self.peek()[0] in (None, "rparen"):
                raise SprigSyntaxError("Nothing to quote after '")
            return Quoted(self.parse_expr())

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                kind = self.peek()[0]
                if kind == "rparen":
                    self.advance()
                    break
                if kind is None:
                    raise SprigUnmatchedParen("Unmatched '('")
                items.append(self.parse_expr())
            return new_list(items)

        if tok_type == "rparen":
            raise SprigUnmatchedParen("Unmatched ')'")

        if tok_type == "string":
            self.advance()
            return Str(ESCAPE_RE.sub(r"\1", tok_val[1:-1]))

        raise SprigSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> Program:
    """Parse `source`, which must hold at most one top-level expression."""
    text = source.strip()
    stream = TokenStream(lex(text))
    entry = stream.parse_expr()
    if stream.peek()[0] is not None:
        if stream.peek()[0] == "rparen":
            raise SprigUnmatchedParen("Unmatched ')'")
        raise SprigSyntaxError("Expected a single top-level expression")
    return Program(text, entry)
