"""Heap, radix, merge, quick, shell and tim sorts for integers, with a timing command."""

__version__ = "0.1.0"