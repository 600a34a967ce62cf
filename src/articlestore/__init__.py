"""Whole-file JSON article repository."""

__version__ = "0.1.0"
