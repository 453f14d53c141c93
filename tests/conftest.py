"""Shared test fixtures for the scopefilters test suite."""

from __future__ import annotations

from typing import Callable, Dict, Generator

import pytest
from sqlalchemy.orm import Session

from scopefilters.database import DatabaseManager
from scopefilters.query import RecordQuery
from tests.models import Base, Document, Tag


@pytest.fixture()
def db() -> Generator[DatabaseManager, None, None]:
    """Initialized in-memory SQLite database with the test schema."""
    manager = DatabaseManager(url="sqlite+pysqlite:///:memory:", echo=False)
    manager.initialize()
    manager.create_all(Base.metadata)
    yield manager
    manager.close()


@pytest.fixture()
def session(db: DatabaseManager) -> Generator[Session, None, None]:
    with db.get_session() as session:
        yield session


@pytest.fixture()
def create_document(session: Session) -> Callable[..., Document]:
    """Factory persisting a Document with the given attributes."""

    def _create(**attrs: object) -> Document:
        document = Document(**attrs)
        session.add(document)
        session.flush()
        return document

    return _create


@pytest.fixture()
def tags(session: Session) -> Dict[str, Tag]:
    """Two persisted tags, keyed by name."""
    created = {name: Tag(name=name) for name in ("ruby", "programming")}
    session.add_all(created.values())
    session.flush()
    return created


@pytest.fixture()
def documents_query() -> RecordQuery:
    """In-memory documents."""
    return RecordQuery.from_records(
        "documents",
        [
            {"name": "test_document", "status": "finished", "full_name": "John Doe"},
            {"name": "my_test_file", "status": "processing", "full_name": "Johnny Smith"},
            {"name": "other_document", "status": "finished", "full_name": "Jane Smith"},
            {"name": "republished", "status": "republished", "full_name": None},
        ],
    )
