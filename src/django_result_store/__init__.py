"""Immutable, reducer-driven storage of computed results for Django."""

__version__ = "0.1.0"
