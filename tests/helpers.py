"""Helpers shared by the database-backed tests."""

from __future__ import annotations

from sqlalchemy.orm import Session


def run(session: Session, statement: object) -> list:
    """Execute a Select and return the distinct ORM rows."""
    return list(session.scalars(statement).unique().all())
