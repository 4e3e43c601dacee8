"""SINT-7, a side-scrolling puzzle adventure: game rules, puzzles and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]