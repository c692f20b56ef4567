"""Classic algorithm and data-structure routines on plain Python values."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "backtracking",
    "cses_basics",
    "cses_graphs",
    "dp",
    "graphs",
    "heaps",
    "recursion",
    "sorting",
    "tree",
]