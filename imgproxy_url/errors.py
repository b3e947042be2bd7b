"""Exceptions raised while building proxy URLs."""

from __future__ import annotations


class FormatError(ValueError):
    """Raised when a signing key or salt is not valid hexadecimal."""


__all__ = ["FormatError"]
