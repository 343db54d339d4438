"""
Controller package exports.

This file exists to make controller modules discoverable to static analysis
and to provide a stable import surface.
"""

from .korean_input_controller import KoreanInputController  # noqa: F401

__all__ = [
    "KoreanInputController",
]
