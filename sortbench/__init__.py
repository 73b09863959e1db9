"""Sorting algorithms, a fixed benchmark list, and a command that times them."""

__version__ = "0.1.0"