"""Interactive calculator: read an expression, ask for its variables, print the result."""

from __future__ import annotations

import logging
import math
import sys
from typing import TextIO

from toolbench.expr.nodes import CheckError
from toolbench.expr.parser import ParseError, parse

log = logging.getLogger(__name__)


def variables(expression: str) -> set[str]:
    """Return the names of the variables used in ``expression``."""
    names: set[str] = set()
    parse(expression).check(names)
    return names


def prompt(label: str, stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    """Ask ``label?`` until a non-blank line is read; return "" at end of input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    while True:
        stdout.write(f"{label}? ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            return ""
        text = line.strip()
        if text:
            return text


def _to_number(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _format_f(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:f}"


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> float:
    """Read an expression and its variable values, print and return the result.

    Raises EOFError if no expression is given, ParseError or CheckError if it
    is invalid. Variable values that are not numbers count as 0.
    """
    stdout = sys.stdout if stdout is None else stdout
    expression = prompt("", stdin, stdout)
    if not expression:
        raise EOFError("quit")
    log.info("Evaluating expression: %r", expression)
    expr = parse(expression)
    names: set[str] = set()
    expr.check(names)
    env = {name: _to_number(prompt(name, stdin, stdout)) for name in sorted(names)}
    result = expr.eval(env)
    stdout.write(f"result> {_format_f(result)}\n")
    return result


def main(argv: list[str] | None = None) -> int:
    """Run the calculator on standard input and output."""
    try:
        run()
    except EOFError as err:
        print(err, file=sys.stderr)
        return 1
    except ParseError as err:
        print(f"Parse error: {err}", file=sys.stderr)
        return 1
    except CheckError as err:
        print(f"Check error: {err}", file=sys.stderr)
        return 1
    return 0