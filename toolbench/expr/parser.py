"""Parser for arithmetic expressions with variables, calls and min."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator
from dataclasses import dataclass

from toolbench.expr.nodes import Binary, Call, Expr, Literal, Min, Unary, Var, precedence


class ParseError(ValueError):
    """Raised when the input is not a well-formed expression."""


class _Kind(enum.Enum):
    EOF = "eof"
    IDENT = "ident"
    NUMBER = "number"
    CHAR = "char"


@dataclass(frozen=True)
class _Lexeme:
    kind: _Kind
    text: str


_PATTERN = re.compile(
    r"""
    [ \t\n\r]*
    (?:
        (?P<number>
            0[xX][0-9a-fA-F]*(?:\.[0-9a-fA-F]*)?(?:[pP][+-]?[0-9]*)?
          | (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]*)?
        )
      | (?P<ident>[^\W\d]\w*)
      | (?P<char>.)
    )
    """,
    re.VERBOSE | re.DOTALL,
)

_KINDS = {"number": _Kind.NUMBER, "ident": _Kind.IDENT, "char": _Kind.CHAR}

_RUNE_ESCAPES = {
    "'": "\\'",
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _scan(text: str) -> Iterator[_Lexeme]:
    pos = 0
    while m := _PATTERN.match(text, pos):
        kind = m.lastgroup
        yield _Lexeme(_KINDS[kind], m.group(kind))
        pos = m.end()
    while True:
        yield _Lexeme(_Kind.EOF, "")


def _quote_rune(ch: str) -> str:
    if ch in _RUNE_ESCAPES:
        body = _RUNE_ESCAPES[ch]
    elif ch.isprintable():
        body = ch
    elif ord(ch) < 0x80:
        body = f"\\x{ord(ch):02x}"
    elif ord(ch) <= 0xFFFF:
        body = f"\\u{ord(ch):04x}"
    else:
        body = f"\\U{ord(ch):08x}"
    return f"'{body}'"


def _to_float(text: str) -> float:
    try:
        if text[:2].lower() == "0x":
            if "p" not in text.lower():
                raise ValueError(text)
            return float.fromhex(text)
        return float(text)
    except ValueError:
        raise ParseError(f'invalid number syntax "{text}"') from None


class _Lexer:
    def __init__(self, text: str) -> None:
        self._lexemes = _scan(text)
        self.current = next(self._lexemes)

    def next(self) -> None:
        self.current = next(self._lexemes)

    def is_char(self, *chars: str) -> bool:
        return self.current.kind is _Kind.CHAR and self.current.text in chars

    def op_precedence(self) -> int:
        return precedence(self.current.text) if self.current.kind is _Kind.CHAR else 0

    def describe(self) -> str:
        kind = self.current.kind
        if kind is _Kind.EOF:
            return "end of file"
        if kind is _Kind.IDENT:
            return f"identifier {self.current.text}"
        if kind is _Kind.NUMBER:
            return f"number {self.current.text}"
        return _quote_rune(self.current.text)

    def expect_close(self) -> None:
        if not self.is_char(")"):
            raise ParseError(f"got {self.describe()}, want ')'")
        self.next()


def parse(text: str) -> Expr:
    """Parse ``text`` as an arithmetic expression.

    The grammar covers numbers, variables, calls ``id(expr, ...)``,
    ``min(expr, expr)``, unary + and -, and binary + - * / with the usual
    precedence and left associativity.
    """
    lex = _Lexer(text)
    expr = _parse_expr(lex)
    if lex.current.kind is not _Kind.EOF:
        raise ParseError(f"unexpected {lex.describe()}")
    return expr


def _parse_expr(lex: _Lexer) -> Expr:
    return _parse_binary(lex, 1)


def _parse_binary(lex: _Lexer, min_prec: int) -> Expr:
    lhs = _parse_unary(lex)
    for prec in range(lex.op_precedence(), min_prec - 1, -1):
        while lex.op_precedence() == prec:
            op = lex.current.text
            lex.next()
            rhs = _parse_binary(lex, prec + 1)
            lhs = Binary(op, lhs, rhs)
    return lhs


def _parse_unary(lex: _Lexer) -> Expr:
    if lex.is_char("+", "-"):
        op = lex.current.text
        lex.next()
        return Unary(op, _parse_unary(lex))
    return _parse_primary(lex)


def _parse_call_args(lex: _Lexer) -> list[Expr]:
    args: list[Expr] = []
    if lex.is_char(")"):
        lex.next()
        return args
    while True:
        args.append(_parse_expr(lex))
        if not lex.is_char(","):
            break
        lex.next()
    lex.expect_close()
    return args


def _parse_primary(lex: _Lexer) -> Expr:
    lexeme = lex.current
    if lexeme.kind is _Kind.IDENT:
        lex.next()
        if not lex.is_char("("):
            return Var(lexeme.text)
        lex.next()
        args = _parse_call_args(lex)
        if lexeme.text == "min":
            if len(args) != 2:
                raise ParseError(f"min: got {len(args)} arguments, want exactly 2")
            return Min(args[0], args[1])
        return Call(lexeme.text, tuple(args))
    if lexeme.kind is _Kind.NUMBER:
        value = _to_float(lexeme.text)
        lex.next()
        return Literal(value)
    if lex.is_char("("):
        lex.next()
        expr = _parse_expr(lex)
        lex.expect_close()
        return expr
    raise ParseError(f"unexpected {lex.describe()}")