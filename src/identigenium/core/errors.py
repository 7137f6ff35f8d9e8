"""Exceptions raised by the identigenium core."""

from __future__ import annotations


class IdentigeniumError(Exception):
    """Base class for every error raised by identigenium."""


class InvalidAlphabetError(IdentigeniumError, ValueError):
    """Raised when an alphabet is empty, holds duplicates or non-character symbols."""


class InvalidPositionError(IdentigeniumError, ValueError):
    """Raised when a sequence position is negative or an ID cannot be ranked."""
