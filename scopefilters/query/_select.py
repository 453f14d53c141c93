"""SQLAlchemy ``Select`` adapter for the Queryable protocol."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

from sqlalchemy import FromClause, Join, Select, literal_column
from sqlalchemy.sql import ColumnElement

logger = logging.getLogger(__name__)


def _iter_tables(from_clause: FromClause) -> Iterator[FromClause]:
    """Yield the named tables (or aliases) of a FROM element, left to right."""
    if isinstance(from_clause, Join):
        yield from _iter_tables(from_clause.left)
        yield from _iter_tables(from_clause.right)
    elif getattr(from_clause, "name", None):
        yield from_clause


class SelectQuery:
    """
    Immutable Queryable over a SQLAlchemy ``Select`` statement.

    Columns are resolved against the tables already present in the
    statement, including every side of its joins, so a qualifier picks
    the right ``name`` column when two joined tables both have one.

    Example:
        query = SelectQuery(select(Document).join(Document.tags))
        query = query.with_pattern_predicate("tags", "name", "rub")
        session.scalars(query.statement).all()
    """

    __slots__ = ("_statement",)

    def __init__(self, statement: Select):
        self._statement = statement

    @property
    def statement(self) -> Select:
        """The wrapped statement."""
        return self._statement

    def primary_collection_name(self) -> str:
        for from_clause in self._statement.get_final_froms():
            for table in _iter_tables(from_clause):
                return table.name
        raise ValueError("Statement has no FROM clause to qualify columns with")

    def _find_table(self, collection: str) -> Optional[FromClause]:
        for from_clause in self._statement.get_final_froms():
            for table in _iter_tables(from_clause):
                if table.name == collection:
                    return table
        return None

    def _column(self, collection: str, column: str) -> ColumnElement[Any]:
        table = self._find_table(collection)
        if table is not None and column in table.c:
            return table.c[column]

        # Left to the store: it raises on an unknown table or column when
        # the statement executes.
        logger.debug(
            f"{collection}.{column} not found in statement, emitting literal column"
        )
        return literal_column(f"{collection}.{column}")

    def with_equality_predicate(
        self, collection: str, column: str, value: Any
    ) -> SelectQuery:
        return SelectQuery(
            self._statement.where(self._column(collection, column) == value)
        )

    def with_pattern_predicate(
        self, collection: str, column: str, value: Any
    ) -> SelectQuery:
        return SelectQuery(
            self._statement.where(self._column(collection, column).like(f"%{value}%"))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectQuery):
            return NotImplemented
        return self._statement is other._statement

    def __hash__(self) -> int:
        return id(self._statement)

    def __repr__(self) -> str:
        return f"SelectQuery({self._statement!r})"
