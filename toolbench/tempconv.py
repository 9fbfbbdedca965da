"""Celsius, Fahrenheit and Kelvin temperatures, and a Celsius command-line option."""

from __future__ import annotations

import argparse
import re

from toolbench.surface import _format_g

_TEMPERATURE = re.compile(
    r"\s*(?P<value>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)(?P<rest>.*)",
    re.DOTALL,
)


class Celsius(float):
    """A temperature in degrees Celsius."""

    def __str__(self) -> str:
        return f"{_format_g(float(self))}°C"


class Fahrenheit(float):
    """A temperature in degrees Fahrenheit."""

    def __str__(self) -> str:
        return f"{_format_g(float(self))}°F"


class Kelvin(float):
    """A temperature in kelvins."""

    def __str__(self) -> str:
        return f"{_format_g(float(self))}K"


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((f - 32) * 5 / 9)


def k_to_c(k: float) -> Celsius:
    """Convert a Kelvin temperature to Celsius."""
    return Celsius(k - 273.15)


def parse_celsius(text: str) -> Celsius:
    """Parse a temperature such as "10C", "32°F" or "273.15K" into Celsius.

    Raises ValueError if the text is malformed or the unit is unknown.
    """
    match = _TEMPERATURE.match(text)
    unit_parts = match.group("rest").split() if match else []
    if not unit_parts:
        raise ValueError(f'invalid input format "{text}"')
    value = float(match.group("value"))
    unit = unit_parts[0]
    if unit in ("C", "°C"):
        return Celsius(value)
    if unit in ("F", "°F"):
        return f_to_c(value)
    if unit == "K":
        return k_to_c(value)
    raise ValueError(f'invalid temperature "{text}"')


def celsius_flag(
    parser: argparse.ArgumentParser, name: str, default: float, usage: str
) -> argparse.Action:
    """Add a ``-name`` option to ``parser`` that takes a temperature in any unit.

    The parsed value is stored as Celsius under ``name``; the help text shows
    the default, e.g. "(default 20°C)".
    """
    help_text = f"{usage.replace('%', '%%')} (default %(default)s)"
    return parser.add_argument(
        f"-{name}",
        dest=name,
        type=parse_celsius,
        default=Celsius(default),
        metavar="TEMP",
        help=help_text,
    )