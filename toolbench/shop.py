"""A tiny shop inventory served as a WSGI application."""

from __future__ import annotations

import math
import struct
from urllib.parse import parse_qs

_HTML_ESCAPES = str.maketrans(
    {
        "\0": "\ufffd",
        '"': "&#34;",
        "'": "&#39;",
        "&": "&amp;",
        "+": "&#43;",
        "<": "&lt;",
        ">": "&gt;",
    }
)

_TABLE_HEAD = (
    "\n<table>\n  <tr>\n    <th>Item</th>\n    <th>Price</th>\n  </tr>\n  "
)
_TABLE_ROW = (
    '\n  <tr>\n    <td id="item">{item}</td>\n    <td id="price">{price}</td>\n  </tr>\n  '
)
_TABLE_TAIL = "\n</table>"


class RequestError(ValueError):
    """Raised for a request the shop cannot satisfy."""


def format_price(value: float) -> str:
    """Format a price as dollars with two decimals, e.g. "$6.00"."""
    if math.isnan(value):
        return "$NaN"
    if math.isinf(value):
        return "$+Inf" if value > 0 else "$-Inf"
    return f"${value:.2f}"


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _parse_price(text: str) -> float:
    if text != text.strip() or "_" in text:
        raise RequestError("Could not parse price.")
    try:
        return _to_float32(float(text))
    except (ValueError, OverflowError):
        raise RequestError("Could not parse price.") from None


class ShopApp:
    """A WSGI app with /list, /create, /update and /delete endpoints."""

    def __init__(self, items=None) -> None:
        self._items: dict[str, float] = {
            name: _to_float32(float(price)) for name, price in (items or {}).items()
        }

    def __call__(self, environ, start_response):
        path = environ.get("PATH_INFO", "")
        query = parse_qs(environ.get("QUERY_STRING", ""), keep_blank_values=True)

        def param(name: str) -> str:
            return query.get(name, [""])[0]

        status = "200 OK"
        body = ""
        try:
            if path == "/list":
                body = self.list()
            elif path == "/create":
                self.create(param("item"), param("price"))
            elif path == "/update":
                self.update(param("item"), param("price"))
            elif path == "/delete":
                self.delete(param("item"))
            else:
                status, body = "404 Not Found", "404 page not found\n"
        except RequestError as err:
            status, body = "400 Bad Request", f"{err}\n"
        data = body.encode()
        start_response(
            status,
            [
                ("Content-Type", "text/plain; charset=utf-8"),
                ("Content-Length", str(len(data))),
            ],
        )
        return [data]

    def list(self) -> str:
        """Return one "item: $price" line per item, sorted by name."""
        return "".join(
            f"{name}: {format_price(self._items[name])}\n" for name in sorted(self._items)
        )

    def list_html(self) -> str:
        """Return the inventory as an HTML table, sorted by name."""
        rows = "".join(
            _TABLE_ROW.format(
                item=name.translate(_HTML_ESCAPES),
                price=format_price(self._items[name]).translate(_HTML_ESCAPES),
            )
            for name in sorted(self._items)
        )
        return _TABLE_HEAD + rows + _TABLE_TAIL + "\n"

    def create(self, item: str, price: str) -> None:
        """Add a new item; raise RequestError if it exists or the price is invalid."""
        if item in self._items:
            raise RequestError("Item already exists.")
        self._items[item] = _parse_price(price)

    def update(self, item: str, price: str) -> None:
        """Change the price of an item; raise RequestError if missing or invalid."""
        if item not in self._items:
            raise RequestError("No such item.")
        self._items[item] = _parse_price(price)

    def delete(self, item: str) -> None:
        """Remove an item if present."""
        self._items.pop(item, None)