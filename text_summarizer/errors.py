from __future__ import annotations


class InvalidInput(ValueError):
    """Raised when a required text is missing or empty."""
