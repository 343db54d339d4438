"""Hangul jamo composer with a PyQt6 host layer."""

__version__ = "0.1.0"
