"""Domain error definitions."""

from __future__ import annotations


class InvalidRecordError(ValueError):
    """Raised when user input cannot become a valid alias record."""
