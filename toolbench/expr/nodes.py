"""Syntax tree of arithmetic expressions: evaluation, checking and printing."""

from __future__ import annotations

import math
import operator
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, MutableSet
from dataclasses import dataclass
from typing import Optional

Env = Mapping[str, float]
VarSet = MutableSet[str]


class CheckError(ValueError):
    """Raised when an expression is statically invalid."""


def precedence(op: str) -> int:
    """Return the binding strength of a binary operator; 0 if it is not one."""
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return 0


def format_number(value: float) -> str:
    """Format a number with up to six significant digits, as %.6g does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return "%.6g" % value


def _divide(x: float, y: float) -> float:
    if y == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y.is_integer() and int(y) % 2 == 1


def _pow(x: float, y: float) -> float:
    if x == 0 and y < 0:
        if _is_odd_integer(y):
            return math.copysign(math.inf, x)
        return math.inf
    try:
        return math.pow(x, y)
    except OverflowError:
        return -math.inf if x < 0 and _is_odd_integer(y) else math.inf
    except ValueError:
        return math.nan


def _sin(x: float) -> float:
    return math.nan if math.isinf(x) else math.sin(x)


def _sqrt(x: float) -> float:
    return math.nan if x < 0 else math.sqrt(x)


_BINARY_OPS: dict[str, Callable[[float, float], float]] = {
    "*": operator.mul,
    "/": _divide,
    "+": operator.add,
    "-": operator.sub,
}

_FUNCTIONS: dict[str, tuple[int, Callable[..., float]]] = {
    "pow": (2, _pow),
    "sin": (1, _sin),
    "sqrt": (1, _sqrt),
}


class Expr(ABC):
    """An arithmetic expression."""

    __slots__ = ()

    @abstractmethod
    def eval(self, env: Optional[Env] = None) -> float:
        """Evaluate the expression; variables missing from ``env`` are 0."""

    @abstractmethod
    def check(self, vars: Optional[VarSet] = None) -> None:
        """Raise CheckError if the expression is invalid; add its variable names to ``vars``."""


@dataclass(frozen=True)
class Literal(Expr):
    """A numeric constant."""

    value: float

    def eval(self, env: Optional[Env] = None) -> float:
        return float(self.value)

    def check(self, vars: Optional[VarSet] = None) -> None:
        return None

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class Unary(Expr):
    """A unary operator, + or -, applied to an operand."""

    op: str
    x: Expr

    def eval(self, env: Optional[Env] = None) -> float:
        if self.op == "+":
            return +self.x.eval(env)
        if self.op == "-":
            return -self.x.eval(env)
        raise ValueError(f"unsupported unary operator: '{self.op}'")

    def check(self, vars: Optional[VarSet] = None) -> None:
        if self.op not in ("+", "-"):
            raise CheckError(f"unexpected unary op '{self.op}'")
        self.x.check(vars)

    def __str__(self) -> str:
        return f"{self.op}{self.x}"


@dataclass(frozen=True)
class Binary(Expr):
    """A binary operator, one of + - * /, applied to two operands."""

    op: str
    x: Expr
    y: Expr

    def eval(self, env: Optional[Env] = None) -> float:
        try:
            apply = _BINARY_OPS[self.op]
        except KeyError:
            raise ValueError(f"unsupported binary operator: '{self.op}'") from None
        return apply(self.x.eval(env), self.y.eval(env))

    def check(self, vars: Optional[VarSet] = None) -> None:
        if self.op not in _BINARY_OPS:
            raise CheckError(f"unexpected binary op '{self.op}'")
        self.x.check(vars)
        self.y.check(vars)

    def __str__(self) -> str:
        left, right = ("(", ")") if precedence(self.op) < 2 else ("", "")
        return f"{left}{self.x} {self.op} {self.y}{right}"


@dataclass(frozen=True)
class Var(Expr):
    """A reference to a variable by name."""

    name: str

    def eval(self, env: Optional[Env] = None) -> float:
        if env is None:
            return 0.0
        return float(env.get(self.name, 0.0))

    def check(self, vars: Optional[VarSet] = None) -> None:
        if vars is not None:
            vars.add(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Call(Expr):
    """A call of one of the functions pow, sin or sqrt."""

    fn: str
    args: tuple[Expr, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def eval(self, env: Optional[Env] = None) -> float:
        try:
            arity, function = _FUNCTIONS[self.fn]
        except KeyError:
            raise ValueError(f'unsupported function call: "{self.fn}"') from None
        if len(self.args) != arity:
            raise ValueError(f"call to {self.fn} has {len(self.args)} args, want {arity}")
        return function(*(arg.eval(env) for arg in self.args))

    def check(self, vars: Optional[VarSet] = None) -> None:
        if self.fn not in _FUNCTIONS:
            raise CheckError(f'unknown function "{self.fn}"')
        arity = _FUNCTIONS[self.fn][0]
        if len(self.args) != arity:
            raise CheckError(f"call to {self.fn} has {len(self.args)} args, want {arity}")
        for arg in self.args:
            arg.check(vars)

    def __str__(self) -> str:
        return f"{self.fn}({', '.join(map(str, self.args))})"


@dataclass(frozen=True)
class Min(Expr):
    """The smaller of two operands."""

    x: Expr
    y: Expr

    def eval(self, env: Optional[Env] = None) -> float:
        a, b = self.x.eval(env), self.y.eval(env)
        if a == -math.inf or b == -math.inf:
            return -math.inf
        if math.isnan(a) or math.isnan(b):
            return math.nan
        if a == 0 and b == 0:
            return a if math.copysign(1.0, a) < 0 else b
        return min(a, b)

    def check(self, vars: Optional[VarSet] = None) -> None:
        self.x.check(vars)
        self.y.check(vars)

    def __str__(self) -> str:
        return f"min({self.x}, {self.y})"