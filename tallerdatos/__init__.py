"""Heaps, graphs, hash tables and an arithmetic lexer, each usable as a command."""

__version__ = "0.1.0"