"""Music tracks: sorting by column, and printing as a text or HTML table."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from functools import cmp_to_key
from typing import TextIO

from toolbench.shop import _HTML_ESCAPES

COLUMNS = ("Title", "Artist", "Album", "Year", "Length")

_UNIT_NS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)([^\d.]*)")

_PADDING = 2


@dataclass
class Track:
    """A music track."""

    title: str
    artist: str
    album: str
    year: int
    length: timedelta


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as "3m38s", "1.5h" or "-250ms".

    Raises ValueError for a malformed duration or an unknown unit.
    """
    rest = text
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if rest == "":
        raise ValueError(f'time: invalid duration "{text}"')
    total = Decimal(0)
    pos = 0
    while pos < len(rest):
        match = _DURATION_PART.match(rest, pos)
        if match is None:
            raise ValueError(f'time: invalid duration "{text}"')
        number, unit = match.groups()
        if unit == "":
            raise ValueError(f'time: missing unit in duration "{text}"')
        if unit not in _UNIT_NS:
            raise ValueError(f'time: unknown unit "{unit}" in duration "{text}"')
        total += Decimal(number) * _UNIT_NS[unit]
        pos = match.end()
    micros = int(total / 1000)
    return timedelta(microseconds=-micros if negative else micros)


def _fraction(value: int, width: int) -> str:
    if width == 0:
        return ""
    digits = f"{value:0{width}d}".rstrip("0")
    return f".{digits}" if digits else ""


def format_duration(length: timedelta) -> str:
    """Format a duration the compact way, e.g. "3m38s", "1h0m0s", "500ms"."""
    ns = (length // timedelta(microseconds=1)) * 1000
    sign = "-" if ns < 0 else ""
    u = abs(ns)
    if u == 0:
        return "0s"
    if u < 1_000_000_000:
        if u < 1_000:
            return f"{sign}{u}ns"
        if u < 1_000_000:
            whole, frac = divmod(u, 1_000)
            return f"{sign}{whole}{_fraction(frac, 3)}µs"
        whole, frac = divmod(u, 1_000_000)
        return f"{sign}{whole}{_fraction(frac, 6)}ms"
    total_seconds, frac = divmod(u, 1_000_000_000)
    total_minutes, seconds = divmod(total_seconds, 60)
    hours, minutes = divmod(total_minutes, 60)
    text = f"{seconds}{_fraction(frac, 9)}s"
    if total_minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return sign + text


def custom_sort(
    tracks: Iterable[Track], less: Callable[[Track, Track], bool]
) -> list[Track]:
    """Return the tracks sorted by the ``less`` function."""

    def compare(x: Track, y: Track) -> int:
        if less(x, y):
            return -1
        if less(y, x):
            return 1
        return 0

    return sorted(tracks, key=cmp_to_key(compare))


def sort_tracks(tracks: Iterable[Track], column: str) -> list[Track]:
    """Return the tracks stably sorted by one of the column names in COLUMNS."""
    if column not in COLUMNS:
        raise ValueError(f"unknown column {column!r}")
    attribute = column.lower()
    return sorted(tracks, key=lambda track: getattr(track, attribute))


def _cells(track: Track) -> tuple[str, ...]:
    return (
        track.title,
        track.artist,
        track.album,
        str(track.year),
        format_duration(track.length),
    )


def print_tracks(tracks: Sequence[Track], out: TextIO | None = None) -> None:
    """Write the tracks as an aligned text table with a header."""
    out = sys.stdout if out is None else out
    rows = [COLUMNS, tuple("-" * len(name) for name in COLUMNS)]
    rows.extend(_cells(track) for track in tracks)
    widths = [max(len(cell) for cell in column) + _PADDING for column in zip(*rows)]
    for row in rows:
        out.write("".join(cell.ljust(width) for cell, width in zip(row, widths)) + "\n")


def _escape(text: str) -> str:
    return text.translate(_HTML_ESCAPES)


def tracks_as_html(tracks: Sequence[Track]) -> str:
    """Return the tracks as an HTML table whose headers link to sort by column."""
    head = (
        "\n<table>\n  <tr>\n"
        + "".join(
            f'    <th><a id="HeaderLinkBy{name}" href="?sort={name}">{name}</a></th>\n'
            for name in COLUMNS
        )
        + "  </tr>\n  "
    )
    rows = "".join(
        f'\n  <tr id="row{index}">\n'
        + "".join(
            f'    <td id="row{index}col{name}">{_escape(cell)}</td>\n'
            for name, cell in zip(COLUMNS, _cells(track))
        )
        + "  </tr>\n  "
        for index, track in enumerate(tracks)
    )
    return head + rows + "\n</table>"