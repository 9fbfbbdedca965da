"""Small utilities for HTML trees, crawling, integer sets, expressions, graphs and plotting."""

__version__ = "0.1.0"