"""A WSGI endpoint that plots a user-supplied expression of x, y and r as SVG."""

from __future__ import annotations

import io
import math
from urllib.parse import parse_qs

from toolbench.expr.nodes import CheckError, Expr
from toolbench.expr.parser import ParseError, parse
from toolbench.surface import surface

_ALLOWED_VARS = frozenset({"x", "y", "r"})


def parse_and_check(text: str) -> Expr:
    """Parse and check an expression that may use only the variables x, y and r."""
    if text == "":
        raise ValueError("empty expression")
    expr = parse(text)
    names: set[str] = set()
    expr.check(names)
    for name in sorted(names):
        if name not in _ALLOWED_VARS:
            raise ValueError(f"undefined variable: {name}")
    return expr


def _form(environ) -> dict[str, list[str]]:
    values: dict[str, list[str]] = {}
    content_type = environ.get("CONTENT_TYPE", "")
    if environ.get("REQUEST_METHOD") in ("POST", "PUT", "PATCH") and content_type.startswith(
        "application/x-www-form-urlencoded"
    ):
        length = int(environ.get("CONTENT_LENGTH") or 0)
        body = environ["wsgi.input"].read(length).decode("utf-8", errors="replace")
        values = parse_qs(body, keep_blank_values=True)
    for key, items in parse_qs(environ.get("QUERY_STRING", ""), keep_blank_values=True).items():
        values.setdefault(key, []).extend(items)
    return values


def plot_app(environ, start_response):
    """Render the surface of the ``expr`` form value as an SVG image."""
    text = _form(environ).get("expr", [""])[0]
    try:
        expr = parse_and_check(text)
    except (ValueError, ParseError, CheckError) as err:
        data = f"bad expr: {err}\n".encode()
        start_response(
            "400 Bad Request",
            [("Content-Type", "text/plain; charset=utf-8"), ("Content-Length", str(len(data)))],
        )
        return [data]

    def height(x: float, y: float) -> float:
        return expr.eval({"x": x, "y": y, "r": math.hypot(x, y)})

    out = io.StringIO()
    surface(out, height)
    data = out.getvalue().encode()
    start_response(
        "200 OK", [("Content-Type", "image/svg+xml"), ("Content-Length", str(len(data)))]
    )
    return [data]