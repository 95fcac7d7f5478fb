"""Cycle-by-cycle simulator of Tomasulo's algorithm, with a demonstration command."""

__version__ = "0.1.0"

__all__ = ["__version__"]