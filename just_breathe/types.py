"""Shared error types."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when the fixed breathing constants are invalid (bad duration, bounds, easing)."""
