"""Competitive programming problems solved as plain Python functions, with a command-line runner."""

__version__ = "0.1.0"
__all__ = [
    "arithmetic",
    "arrays",
    "cli",
    "constructive",
    "dp",
    "graphs",
    "greedy",
    "grids",
    "queries",
    "selection",
    "strings",
]