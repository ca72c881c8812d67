"""Algorithms and data structures for number theory, convolutions, polynomials,
strings, trees, graphs and geometry."""

__version__ = "0.1.0"