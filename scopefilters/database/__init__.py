"""SQLAlchemy engine and session management."""

from scopefilters.database._manager import DatabaseManager

__all__ = [
    "DatabaseManager",
]
