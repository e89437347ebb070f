"""Array and I/O convenience helpers."""

__version__ = "0.1.0"
