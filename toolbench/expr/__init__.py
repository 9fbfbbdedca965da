"""Arithmetic expressions: syntax tree nodes and a parser."""

__all__ = ["nodes", "parser"]