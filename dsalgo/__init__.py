"""Classic data structures and algorithms: searching, heaps, hash tables, graphs and string matching."""

__version__ = "0.1.0"