"""A same-site web crawler that saves the pages it visits, and a single-URL fetcher."""

from __future__ import annotations

import contextlib
import logging
import posixpath
import urllib.request
from pathlib import Path
from urllib.error import HTTPError, URLError
from urllib.parse import urljoin, urlsplit

from toolbench.graphs import breadth_first
from toolbench.htmltree import NodeType, for_each_node, parse

log = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a page cannot be fetched, parsed or saved."""


class Crawler:
    """Crawl pages breadth first, saving each under ``download_dir``.

    Pages are stored in a folder named ``<hostname>__<port>`` that mirrors
    the path of each page. Only links to the same host are followed.
    """

    def __init__(self, download_dir: str | Path) -> None:
        self.download_dir = Path(download_dir)

    def _destination(self, url: str) -> tuple[Path, Path]:
        parts = urlsplit(url)
        port = "" if parts.port is None else str(parts.port)
        folder = self.download_dir / f"{parts.hostname or ''}__{port}"
        path = parts.path
        if path == "":
            return folder, folder / "index.html"
        if path.endswith("/"):
            folder = folder / path.strip("/")
            return folder, folder / "index.html"
        last_slash = path.rfind("/")
        last_dot = path.rfind(".")
        if last_slash < last_dot < len(path) - 1:
            folder = folder / path[:last_slash].lstrip("/")
            return folder, folder / path[last_slash + 1:]
        raise FetchError(f'unable to create file for "{url}"')

    def extract(self, address: str) -> list[str]:
        """Fetch ``address``, save the page and return its links as absolute URLs."""
        try:
            with urllib.request.urlopen(address) as resp:
                final_url = resp.geturl()
                status = resp.status
                reason = resp.reason
                charset = resp.headers.get_content_charset() or "utf-8"
                body = resp.read()
        except HTTPError as err:
            raise FetchError(f'getting "{address}": {err.code} {err.reason}') from err
        except URLError as err:
            raise FetchError(f'getting "{address}": {err.reason}') from err
        if status != 200:
            raise FetchError(f'getting "{address}": {status} {reason}')
        doc = parse(body.decode(charset, errors="replace"))

        folder, target = self._destination(final_url)
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise FetchError(f'unable to create directory "{folder}"') from err
        try:
            target.write_bytes(body)
        except OSError as err:
            raise FetchError(f'unable to create file "{target}"') from err

        found: list[str] = []

        def visit(node) -> None:
            if node.type is NodeType.ELEMENT and node.data == "a":
                for key, value in node.attrs:
                    if key != "href":
                        continue
                    try:
                        found.append(urljoin(final_url, value))
                    except ValueError:
                        continue

        for_each_node(doc, visit, None)
        return found

    def crawl(self, address: str) -> list[str]:
        """Extract ``address`` and return its links to the same host; log failures."""
        try:
            found = self.extract(address)
        except FetchError as err:
            log.error("extract: %s", err)
            return []
        host = urlsplit(address).netloc
        return [link for link in found if urlsplit(link).netloc == host]

    def run(self, roots) -> None:
        """Crawl breadth first from each URL in ``roots``."""
        breadth_first(self.crawl, roots)


def _base_name(path: str) -> str:
    if path == "":
        return "."
    stripped = path.rstrip("/")
    if stripped == "":
        return "/"
    return posixpath.basename(stripped)


def fetch(url: str, directory: str | Path | None = None) -> tuple[Path, int]:
    """Download ``url`` into ``directory`` and return the file path and bytes written.

    The file is named after the last element of the URL path, or index.html.
    """
    try:
        resp = urllib.request.urlopen(url)
    except HTTPError as err:
        resp = err
    with contextlib.closing(resp):
        local = _base_name(urlsplit(resp.geturl()).path)
        if local in ("/", "."):
            local = "index.html"
        target = Path(directory if directory is not None else ".") / local
        written = 0
        with open(target, "wb") as out:
            while chunk := resp.read(64 * 1024):
                out.write(chunk)
                written += len(chunk)
    return target, written