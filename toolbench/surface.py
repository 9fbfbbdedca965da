"""SVG rendering of a 3-D surface function as an isometric wireframe."""

from __future__ import annotations

import math
from collections.abc import Callable
from decimal import Decimal
from typing import TextIO

WIDTH, HEIGHT = 600, 320
CELLS = 100
XYRANGE = 30.0
XYSCALE = WIDTH / 2 / XYRANGE
ZSCALE = HEIGHT * 0.4
ANGLE = math.pi / 6

_SIN30, _COS30 = math.sin(ANGLE), math.cos(ANGLE)

SurfaceFunc = Callable[[float, float], float]


def ripple(x: float, y: float) -> float:
    """Return sin(r)/r where r is the distance from the origin; NaN at the origin."""
    r = math.hypot(x, y)
    if r == 0:
        return math.nan
    return math.sin(r) / r


def corner(i: int, j: int, f: SurfaceFunc = ripple) -> tuple[float, float]:
    """Project the corner of grid cell (i, j) onto the SVG canvas."""
    x = XYRANGE * (i / CELLS - 0.5)
    y = XYRANGE * (j / CELLS - 0.5)
    z = f(x, y)
    sx = WIDTH / 2 + (x - y) * _COS30 * XYSCALE
    sy = HEIGHT / 2 + (x + y) * _SIN30 * XYSCALE - z * ZSCALE
    return sx, sy


def _format_g(value: float) -> str:
    """Format a float in the shortest form, switching to exponent form like %g."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digit_tuple, exp = Decimal(repr(value)).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0") or "0"
    point = len(digit_tuple) + exp  # position of the decimal point within digits
    sci_exp = point - 1
    prefix = "-" if sign else ""
    if sci_exp < -4 or sci_exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exp_sign = "-" if sci_exp < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(sci_exp):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return prefix + digits + "0" * (point - len(digits))
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def surface(out: TextIO, f: SurfaceFunc = ripple) -> int:
    """Write an SVG rendering of ``f`` to ``out`` and return the bytes written."""
    written = 0

    def emit(text: str) -> None:
        nonlocal written
        out.write(text)
        written += len(text.encode())

    emit(
        "<svg xmlns='http://www.w3.org/2000/svg' "
        "style='stroke: grey; fill: white; stroke-width: 0.7' "
        f"width='{WIDTH}' height='{HEIGHT}'>"
    )
    for i in range(CELLS):
        for j in range(CELLS):
            points = (
                corner(i + 1, j, f),
                corner(i, j, f),
                corner(i, j + 1, f),
                corner(i + 1, j + 1, f),
            )
            coords = " ".join(f"{_format_g(x)},{_format_g(y)}" for x, y in points)
            emit(f"<polygon points='{coords}'/>\n")
    emit("</svg>\n")
    return written