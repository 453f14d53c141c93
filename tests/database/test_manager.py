"""Tests for DatabaseManager."""

from __future__ import annotations

import pytest
from sqlalchemy import select
from sqlalchemy.pool import StaticPool

from scopefilters import DatabaseError
from scopefilters.database import DatabaseManager
from scopefilters.filters import FilterSet
from scopefilters.matching import MatchKind
from tests.models import Base, Document


class TestLifecycle:
    def test_not_initialized_by_default(self) -> None:
        manager = DatabaseManager(url="sqlite+pysqlite:///:memory:")
        assert not manager.is_initialized
        assert manager.engine is None

    def test_session_before_initialize_raises(self) -> None:
        manager = DatabaseManager(url="sqlite+pysqlite:///:memory:")
        with pytest.raises(DatabaseError, match="not initialized"):
            with manager.get_session():
                pass

    def test_create_all_before_initialize_raises(self) -> None:
        with pytest.raises(DatabaseError):
            DatabaseManager(url="sqlite://").create_all(Base.metadata)

    def test_initialize_is_idempotent(self, db: DatabaseManager) -> None:
        engine = db.engine
        db.initialize()
        assert db.engine is engine

    def test_memory_database_uses_static_pool(self, db: DatabaseManager) -> None:
        assert isinstance(db.engine.pool, StaticPool)

    def test_close(self) -> None:
        manager = DatabaseManager(url="sqlite://")
        manager.initialize()
        manager.close()
        assert not manager.is_initialized
        assert manager.engine is None
        manager.close()

    def test_default_url_from_settings(self) -> None:
        assert DatabaseManager().url.startswith("sqlite")


class TestSessions:
    def test_rollback_on_error(self, db: DatabaseManager) -> None:
        with pytest.raises(RuntimeError):
            with db.get_session() as session:
                session.add(Document(name="lost"))
                session.flush()
                raise RuntimeError("boom")
        assert db.scalars(select(Document)) == []

    def test_commit_visible_across_sessions(self, db: DatabaseManager) -> None:
        with db.get_session() as session:
            session.add(Document(name="kept"))
            session.commit()
        assert [d.name for d in db.scalars(select(Document))] == ["kept"]

    def test_filtered_statement(self, db: DatabaseManager) -> None:
        class DocumentFilters(FilterSet):
            pass

        DocumentFilters.filter_by("name", match=MatchKind.PATTERN)

        with db.get_session() as session:
            session.add_all([Document(name="annual_report"), Document(name="memo")])
            session.commit()

        statement = DocumentFilters(name="report").apply(select(Document))
        assert [d.name for d in db.scalars(statement)] == ["annual_report"]
