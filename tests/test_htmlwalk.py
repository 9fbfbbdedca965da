import io
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from toolbench.htmltree import NodeType, parse
from toolbench.htmlwalk import (
    count_elements,
    count_words_and_images,
    count_words_and_images_at,
    element_by_id,
    elements_by_tag_name,
    links,
    main,
    outline,
    outline_url,
    pretty_print,
    print_text_content,
    resource_links,
)

BASE = "<html><head></head><body>{}</body></html>"


@pytest.mark.parametrize(
    "document, want",
    [
        ("<html><head></head><body></body></html>", []),
        ('<html><head></head><body><a href="link1">a</a></body></html>', ["link1"]),
        (BASE.format('<a href="link1">a</a><a href="link2">b</a>'), ["link1", "link2"]),
        (
            BASE.format('<a href="link1">a</a><a href="link2">b</a><a href="link1">c</a>'),
            ["link1", "link2", "link1"],
        ),
        (
            BASE.format('<a href="link1">a</a><p><a href="link2">b</a></p><a href="link3">c</a>'),
            ["link1", "link2", "link3"],
        ),
    ],
)
def test_links(document, want):
    assert links(parse(document)) == want


def test_links_example():
    document = """<html>
	<head></head>
	<body>
		<a href="link1">a</a>
		<a href="link2">b</a>
	</body>
</html>"""
    assert links(parse(document)) == ["link1", "link2"]


@pytest.mark.parametrize(
    "document, want",
    [
        ("<html><head></head><body></body></html>", []),
        ('<html><head></head><body><a href="link1">a</a></body></html>', ["link1"]),
        (
            '<html><head><link rel="stylesheet" type="text/css" href="style.css"></head>'
            '<body><a href="link1">a</a></body></html>',
            ["style.css", "link1"],
        ),
        (
            '<html><head><link rel="stylesheet" type="text/css" href="style.css"></head>'
            '<body><a href="link">a</a><img src="imagelink"><script src="scriptlink"></script></body></html>',
            ["style.css", "link", "imagelink", "scriptlink"],
        ),
        (
            BASE.format('<a href="link1">a</a><p><a href="link2">b</a></p><a href="link3">c</a>'),
            ["link1", "link2", "link3"],
        ),
    ],
)
def test_resource_links(document, want):
    assert resource_links(parse(document)) == want


def test_resource_links_example():
    document = """<html>
    <head>
        <link rel="stylesheet" type="text/css" href="style.css">
    </head>
    <body>
        <a href="link">a</a>
        <img src="imagelink">
        <script src="scriptlink"></script>
    </body>
</html>"""
    assert resource_links(parse(document)) == ["style.css", "link", "imagelink", "scriptlink"]


@pytest.mark.parametrize(
    "document, want",
    [
        ("<html><head></head><body></body></html>", {}),
        (BASE.format('<a href="link1">a</a>'), {"a": 1}),
        (BASE.format('<a href="link1">a</a><a href="link2">b</a>'), {"a": 2}),
        (BASE.format('<a href="link1">a</a><a href="link2">b</a><a href="link1">c</a>'), {"a": 3}),
        (
            BASE.format('<a href="link1">a</a><p><a href="link2">b</a></p><a href="link3">c</a>'),
            {"a": 3, "p": 1},
        ),
    ],
)
def test_count_elements(document, want):
    assert count_elements(parse(document)) == want


def test_count_elements_example():
    document = """<html>
	<head></head>
	<body>
		<a href="link1">a</a>
		<p>
			<a href="link2">b</a>
		</p>
		<a href="link3">c</a>
	</body>
</html>"""
    assert count_elements(parse(document)) == {"a": 3, "p": 1}


@pytest.mark.parametrize(
    "document, want",
    [
        ("<html><head></head><body></body></html>", ""),
        ('<html><head></head><body><a href="link1">a</a></body></html>', "a\n"),
        (BASE.format('<a href="link1">a</a><a href="link2">b</a><a href="link1">c</a>'), "a\nb\nc\n"),
        (
            BASE.format('<a href="link1">a</a><p><a href="link2">b</a></p><a href="link3">c</a>'),
            "a\nb\nc\n",
        ),
        (BASE.format("<p>line1</p><p>line2</p>"), "line1\nline2\n"),
        (BASE.format("<h1>title</h1><p>line1</p><p>line2</p>"), "title\nline1\nline2\n"),
        (
            BASE.format("<style>p {color: red;}</style><h1>title</h1><p>line1</p><p>line2</p>"),
            "title\nline1\nline2\n",
        ),
        (
            BASE.format(
                "<style>p {color: red;}</style><h1> title </h1>\n\t"
                '<script src="javascript.js">document.write("hello!")</script>\n'
                "<p>line1</p><p>line2</p>"
            ),
            "title\nline1\nline2\n",
        ),
    ],
)
def test_print_text_content(document, want):
    out = io.StringIO()
    print_text_content(parse(document), out)
    assert out.getvalue() == want


def test_print_text_content_example():
    document = """<html>
	<head></head>
	<body>
		<style>
			p {
				color: red;
			}
		</style>
		<h1>title</h1>
		<script src="javascript.js">
			document.write("hello!")
		</script>
		<p>line1</p>
		<p>line2</p>
	</body>
</html>"""
    out = io.StringIO()
    print_text_content(parse(document), out)
    assert out.getvalue() == "title\nline1\nline2\n"


@pytest.mark.parametrize(
    "document, want",
    [
        ("<html><head></head><body></body></html>", (0, 0)),
        ('<html><head></head><body><a href="link1">a</a></body></html>', (1, 0)),
        (BASE.format("<p>line1</p><p>line2</p>"), (2, 0)),
        (BASE.format('<h1>title</h1><img src="image1"><p>line1</p><p>line2</p>'), (3, 1)),
        (
            BASE.format(
                "<style>p {color: red;}</style><h1>title</h1>"
                '<p><img src="image1">line1</p><p><img src="image2">line2</p>'
            ),
            (3, 2),
        ),
        (
            BASE.format(
                "<style>p {color: red;}</style><h1> title line </h1>\n\t"
                '<script src="javascript.js">document.write("hello!")</script>\n'
                "<p>long line 1</p><p>long line 2</p>"
            ),
            (8, 0),
        ),
        (BASE.format('<img src="image1"><img src="image2"><img src="image3">'), (0, 3)),
    ],
)
def test_count_words_and_images(document, want):
    assert count_words_and_images(parse(document)) == want


@pytest.mark.parametrize(
    "document, tags, want",
    [
        ("<html><head></head><body></body></html>", ["html", "head", "body"], {"html": 1, "head": 1, "body": 1}),
        (BASE.format('<a href="link1">a</a>'), ["html", "head", "a"], {"html": 1, "head": 1, "a": 1}),
        (BASE.format('<a href="link1">a</a>'), ["head", "link"], {"head": 1}),
        (BASE.format('<a href="link1">a</a>'), ["link"], {}),
        (BASE.format('<a href="link1">a</a><a href="link2">a</a>'), ["a"], {"a": 2}),
    ],
)
def test_elements_by_tag_name(document, tags, want):
    result = elements_by_tag_name(parse(document), *tags)
    counts = {}
    for node in result:
        counts[node.data] = counts.get(node.data, 0) + 1
    assert counts == want
    assert all(node.type is NodeType.ELEMENT for node in result)


@pytest.mark.parametrize(
    "document, id_, want",
    [
        (BASE.format("<h1>My First Heading</h1><p>My first paragraph.</p>"), "x", None),
        (BASE.format('<h1 id="x">My First Heading</h1><p>My first paragraph.</p>'), "x", "h1"),
        (
            '<html><head></head><body id="x"><h1 id="x">My First Heading</h1>'
            '<p>My first paragraph.<a href="link1">link 1</a></p></body></html>',
            "x",
            "body",
        ),
        (
            '<html><head></head><body id=""><h1 id="xyza">My First Heading</h1>'
            '<p>My first paragraph.<img src="image1.png" width="200" id="xyz"></p></body></html>',
            "xyz",
            "img",
        ),
        (
            '<html><head></head><body id=""><h1 id="y">My First Heading</h1>'
            '<p id="x">My first paragraph.<img src="image1.png" width="200" id="x"></p>'
            '<h2 id="x">My second paragraph.<img src="image1.png" width="200" id="x"></h2></body></html>',
            "x",
            "p",
        ),
    ],
)
def test_element_by_id(document, id_, want):
    node = element_by_id(parse(document), id_)
    got = node.data if node is not None else None
    assert got == want


OUTLINE_CASES = [
    (
        "<html><head></head><body><h1>My First Heading</h1><p>My first paragraph.</p></body></html>",
        "<html>\n  <head>\n  </head>\n  <body>\n    <h1>\n    </h1>\n    <p>\n    </p>\n  </body>\n</html>\n",
    ),
    (
        "<html><head></head><body><h1>My First Heading</h1><!-- My first comment -->"
        "<p>My first paragraph.</p></body></html>",
        "<html>\n  <head>\n  </head>\n  <body>\n    <h1>\n    </h1>\n    <p>\n    </p>\n  </body>\n</html>\n",
    ),
    (
        "<html><head></head><body><h1>My First Heading</h1><!-- My first comment -->"
        '<p>My first paragraph.<a href="link1">link 1</a></p></body></html>',
        "<html>\n  <head>\n  </head>\n  <body>\n    <h1>\n    </h1>\n    <p>\n"
        "      <a>\n      </a>\n    </p>\n  </body>\n</html>\n",
    ),
    (
        "<html><head></head><body><h1>My First Heading</h1><!-- My first comment -->"
        '<p>My first paragraph.<img src="image1.png" width="200"></p></body></html>',
        "<html>\n  <head>\n  </head>\n  <body>\n    <h1>\n    </h1>\n    <p>\n"
        "      <img>\n      </img>\n    </p>\n  </body>\n</html>\n",
    ),
]


@pytest.mark.parametrize("document, want", OUTLINE_CASES)
def test_outline(document, want):
    out = io.StringIO()
    outline(document, out)
    assert out.getvalue() == want


def _paths(node, stack=()):
    lines = []
    if node.type is NodeType.ELEMENT:
        stack = stack + (node.data,)
        lines.append("[" + " ".join(stack) + "]\n")
    for child in node.children:
        lines.extend(_paths(child, stack))
    return lines


PRETTY_CASES = [
    (
        "<html><head></head><body><h1>My First Heading</h1><p>My first paragraph.</p></body></html>",
        "<html>\n  <head/>\n  <body>\n    <h1>\n      My First Heading\n    </h1>\n"
        "    <p>\n      My first paragraph.\n    </p>\n  </body>\n</html>\n",
        "[html]\n[html head]\n[html body]\n[html body h1]\n[html body p]\n",
    ),
    (
        "<html><head></head><body><h1>My First Heading</h1><!-- My first comment -->"
        "<p>My first paragraph.</p></body></html>",
        "<html>\n  <head/>\n  <body>\n    <h1>\n      My First Heading\n    </h1>\n"
        "    <!-- My first comment -->\n"
        "    <p>\n      My first paragraph.\n    </p>\n  </body>\n</html>\n",
        "[html]\n[html head]\n[html body]\n[html body h1]\n[html body p]\n",
    ),
    (
        "<html><head></head><body><h1>My First Heading</h1><!-- My first comment -->"
        '<p>My first paragraph.<a href="link1">link 1</a></p></body></html>',
        "<html>\n  <head/>\n  <body>\n    <h1>\n      My First Heading\n    </h1>\n"
        "    <!-- My first comment -->\n"
        "    <p>\n      My first paragraph.\n"
        '      <a href="link1">\n        link 1\n      </a>\n'
        "    </p>\n  </body>\n</html>\n",
        "[html]\n[html head]\n[html body]\n[html body h1]\n[html body p]\n[html body p a]\n",
    ),
    (
        "<html><head></head><body><h1>My First Heading</h1><!-- My first comment -->"
        '<p>My first paragraph.<img src="image1.png" width="200"></p></body></html>',
        "<html>\n  <head/>\n  <body>\n    <h1>\n      My First Heading\n    </h1>\n"
        "    <!-- My first comment -->\n"
        "    <p>\n      My first paragraph.\n"
        '      <img src="image1.png" width="200">\n'
        "    </p>\n  </body>\n</html>\n",
        "[html]\n[html head]\n[html body]\n[html body h1]\n[html body p]\n[html body p img]\n",
    ),
]


@pytest.mark.parametrize("document, pretty, paths", PRETTY_CASES)
def test_pretty_print(document, pretty, paths):
    out = io.StringIO()
    pretty_print(document, out)
    assert out.getvalue() == pretty
    reparsed = parse(out.getvalue())
    assert "".join(_paths(reparsed)) == paths


def test_pretty_print_quotes_attribute_values():
    out = io.StringIO()
    pretty_print('<a title="say &quot;hi&quot;">x</a>', out)
    assert '<a title="say \\"hi\\"">' in out.getvalue()


PAGE = (
    "<html><head></head><body><h1>Two words</h1><img src=\"a.png\">"
    "<p>three more words</p></body></html>"
)
PAGE_OUTLINE = (
    "<html>\n  <head>\n  </head>\n  <body>\n    <h1>\n    </h1>\n"
    "    <img>\n    </img>\n    <p>\n    </p>\n  </body>\n</html>\n"
)


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        body = PAGE.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def page_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}/"
    server.shutdown()
    server.server_close()


def test_count_words_and_images_at(page_url):
    assert count_words_and_images_at(page_url) == (5, 1)


def test_count_words_and_images_at_rejects_bad_url():
    with pytest.raises(ValueError):
        count_words_and_images_at("not-a-url")


def test_outline_url(page_url):
    out = io.StringIO()
    outline_url(page_url, out)
    assert out.getvalue() == PAGE_OUTLINE


def test_main_outlines_each_url_and_skips_failures(page_url, capsys):
    assert main(["not-a-url", page_url]) == 0
    captured = capsys.readouterr()
    assert captured.out == PAGE_OUTLINE
    assert "not-a-url" in captured.err