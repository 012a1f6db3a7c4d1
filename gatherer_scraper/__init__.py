"""Gatherer card-detail page extraction."""

__version__ = "0.1.0"
