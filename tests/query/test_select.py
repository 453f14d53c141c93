"""Tests for the SQLAlchemy SelectQuery adapter."""

from __future__ import annotations

from typing import Callable, Dict

import pytest
from sqlalchemy import literal, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from scopefilters.query import Queryable, SelectQuery
from tests.helpers import run
from tests.models import Document, Tag


def _sql(query: SelectQuery) -> str:
    return str(query.statement.compile(compile_kwargs={"literal_binds": True}))


class TestPrimaryCollectionName:
    def test_single_table(self) -> None:
        assert SelectQuery(select(Document)).primary_collection_name() == "documents"

    def test_joined_statement_uses_root_table(self) -> None:
        query = SelectQuery(select(Document).join(Document.tags))
        assert query.primary_collection_name() == "documents"

    def test_no_from_clause_raises(self) -> None:
        with pytest.raises(ValueError, match="no FROM clause"):
            SelectQuery(select(literal(1))).primary_collection_name()


class TestPredicates:
    def test_is_queryable(self) -> None:
        assert isinstance(SelectQuery(select(Document)), Queryable)

    def test_equality_sql(self) -> None:
        query = SelectQuery(select(Document)).with_equality_predicate(
            "documents", "full_name", "John Doe"
        )
        assert "documents.full_name = 'John Doe'" in _sql(query)

    def test_pattern_sql(self) -> None:
        query = SelectQuery(select(Document)).with_pattern_predicate(
            "documents", "name", "test"
        )
        assert "documents.name LIKE '%test%'" in _sql(query)

    def test_values_are_bound_parameters(self) -> None:
        query = SelectQuery(select(Document)).with_pattern_predicate(
            "documents", "name", "x' OR '1'='1"
        )
        compiled = query.statement.compile()
        assert "x' OR" not in str(compiled)
        assert "%x' OR '1'='1%" in compiled.params.values()

    def test_does_not_mutate(self) -> None:
        statement = select(Document)
        query = SelectQuery(statement)
        narrowed = query.with_equality_predicate("documents", "status", "finished")
        assert narrowed is not query
        assert query.statement is statement
        assert "WHERE" not in str(statement)

    def test_joined_table_column(self) -> None:
        query = SelectQuery(select(Document).join(Document.tags))
        sql = _sql(query.with_equality_predicate("tags", "name", "ruby"))
        assert "tags.name = 'ruby'" in sql
        assert "documents.name =" not in sql

    def test_unknown_column_fails_at_execution(self, session: Session) -> None:
        query = SelectQuery(select(Document)).with_equality_predicate(
            "documents", "missing", "x"
        )
        with pytest.raises(OperationalError):
            run(session, query.statement)

    def test_equality_by_identity(self) -> None:
        statement = select(Document)
        assert SelectQuery(statement) == SelectQuery(statement)
        assert SelectQuery(statement) != SelectQuery(select(Document))


class TestExecution:
    def test_pattern_filters_rows(
        self, session: Session, create_document: Callable[..., Document]
    ) -> None:
        match = create_document(name="test_document")
        create_document(name="other_value")
        query = SelectQuery(select(Document)).with_pattern_predicate(
            "documents", "name", "test"
        )
        assert run(session, query.statement) == [match]

    def test_joined_filter(
        self,
        session: Session,
        create_document: Callable[..., Document],
        tags: Dict[str, Tag],
    ) -> None:
        tagged = create_document(name="a", tags=[tags["programming"]])
        create_document(name="b", tags=[tags["ruby"]])
        query = SelectQuery(select(Document).join(Document.tags))
        narrowed = query.with_equality_predicate("tags", "name", "programming")
        assert run(session, narrowed.statement) == [tagged]
