"""Cached command-line view of the russianwarship.rip statistics."""

__version__ = "0.1.0"
