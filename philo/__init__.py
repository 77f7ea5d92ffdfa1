"""Threaded dining philosophers simulation with argument parsing and a command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]