"""Algorithms for number theory, numerical methods and string processing."""

__version__ = "0.1.0"