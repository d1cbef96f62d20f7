"""Exceptions raised by the analysis engine."""

from __future__ import annotations


class InvalidInputError(TypeError):
    """Raised when analyze() receives arguments of the wrong shape."""
