# toolbench

A collection of small, self-contained utilities.

- **HTML trees** (`toolbench.htmltree`, `toolbench.htmlwalk`): `htmltree.parse`
  turns HTML into a tree of `Node` objects, and `for_each_node` walks it with
  optional pre and post callbacks. `htmlwalk` collects links (`links`,
  `resource_links`), counts elements (`count_elements`) and words and images
  (`count_words_and_images`, `count_words_and_images_at`), prints visible text
  (`print_text_content`), finds elements (`elements_by_tag_name`,
  `element_by_id`) and writes outlines (`outline`, `outline_url`) or
  indented documents (`pretty_print`).
- **Web crawling** (`toolbench.crawler`): `Crawler` follows links breadth first
  within one host and saves each page under `<download_dir>/<hostname>__<port>/`,
  mirroring the page path. `fetch(url, directory)` saves a single URL and returns
  the file path and the number of bytes written. Failures raise `FetchError`.
- **Text helpers** (`toolbench.textutil`): `word_freq`, `$name` expansion with
  `expand`, variadic `minimum` / `maximum` and `join_strings`.
- **Graphs** (`toolbench.graphs`): `topo_sort`, `topo_sort_sorted`,
  `topo_sort_strict` (raises `CycleError` on a cycle) and `breadth_first`.
- **Integer sets** (`toolbench.intset`): `IntSet`, a bit-vector set of small
  non-negative integers with union, intersection, difference and symmetric
  difference in place.
- **I/O helpers** (`toolbench.counters`, `toolbench.readers`): `ByteCounter`,
  `WordCounter`, `LineCounter`, `CountingWriter`, `StringReader` and
  `LimitedReader` / `limit_reader`.
- **Expressions** (`toolbench.expr`): `expr.parser.parse` builds a tree from
  `expr.nodes` (`Literal`, `Var`, `Unary`, `Binary`, `Call`, `Min`) supporting
  variables, `+ - * /`, `pow`, `sin`, `sqrt` and `min`. Each node has `eval(env)`
  and `check(vars)`; errors raise `ParseError` or `CheckError`.
- **Plotting** (`toolbench.surface`, `toolbench.plotweb`): `surface` writes an
  SVG wireframe of a function of x and y; `plot_app` is a WSGI app that plots the
  expression given in its `expr` form value, using the variables `x`, `y` and `r`.
- **Miscellany**: `ShopApp`, a WSGI price list with `/list`, `/create`,
  `/update` and `/delete` (`toolbench.shop`); temperatures and an argparse
  option via `celsius_flag` (`toolbench.tempconv`); `stable_sort`
  (`toolbench.stablesort`); track sorting and text/HTML tables
  (`toolbench.music`); a binary search tree (`toolbench.bintree`); and
  `is_palindrome` (`toolbench.palindrome`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Integer sets:

```python
from toolbench.intset import IntSet

s = IntSet(1, 200, 3000)
s.add(42)
print(s)          # {1 42 200 3000}
print(len(s))     # 4
print(200 in s)   # True
```

Expressions:

```python
from toolbench.expr.nodes import format_number
from toolbench.expr.parser import parse

e = parse("pow(x, 3) + pow(y, 3)")
print(format_number(e.eval({"x": 12, "y": 1})))   # 1729
```

Text helpers:

```python
import io
from toolbench.textutil import join_strings, maximum, word_freq

print(word_freq(io.StringIO("The red fox saw the box")))
print(join_strings("-", "one", "two", "three"))   # one-two-three
print(maximum(-1, -3, 2, 0, -4, 5))               # 5
```

HTML:

```python
from toolbench.htmltree import parse
from toolbench.htmlwalk import links

doc = parse('<a href="one">1</a><p><a href="two">2</a></p>')
print(links(doc))   # ['one', 'two']
```

## Command-line tools

Print the element outline of one or more web pages:

```
toolbench-outline https://example.com/
```

Evaluate an expression interactively. You are asked for the expression first
and then for the value of each variable in it, in alphabetical order; the
result is printed as `result> ...`:

```
toolbench-calc
```

## What is not included

`ShopApp` and `plot_app` are plain WSGI applications; the package has no
server or command to host them. Any WSGI server will do, for example the one
in the standard library:

```python
from wsgiref.simple_server import make_server
from toolbench.shop import ShopApp

make_server("localhost", 8000, ShopApp()).serve_forever()
```

The shop keeps its items in memory only; nothing is stored between runs.
There is no command-line tool for the crawler or for `fetch`; use them from
Python.