"""Custom exception hierarchy for the scopefilters library."""

from __future__ import annotations

from typing import Any


class ScopeFiltersError(Exception):
    """Base exception for all scopefilters library errors."""


class ConfigurationError(ScopeFiltersError, ValueError):
    """Invalid filter configuration: empty key, unusable column or table."""


class UnsupportedMatchKind(ScopeFiltersError, ValueError):
    """A match kind that does not map to a known match strategy.

    Parameters
    ----------
    match : Any
        The offending value, kept as-is so callers can inspect it.
    """

    def __init__(self, match: Any) -> None:
        self.match = match
        super().__init__(f"Unsupported match type: {match!r}")


class DatabaseError(ScopeFiltersError):
    """Database manager used before initialization."""
