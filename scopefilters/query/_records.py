"""In-memory Queryable over joined records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Mapping, Tuple

Row = Mapping[str, Mapping[str, Any]]
Predicate = Callable[[Row], bool]


def _lookup(row: Row, collection: str, column: str) -> Any:
    try:
        return row[collection][column]
    except KeyError:
        raise KeyError(f"Unknown column {collection}.{column}") from None


@dataclass(frozen=True)
class RecordQuery:
    """Immutable, lazily evaluated query over in-memory rows.

    Each row maps collection name to that collection's record, so a row
    of a joined result looks like
    ``{"documents": {"name": ...}, "tags": {"name": ...}}``.  Predicates
    are stored, not evaluated, until :meth:`all` is called; like a SQL
    store, an unknown collection or column only fails at that point.

    Parameters
    ----------
    collection : str
        Primary collection name.
    rows : tuple of mappings
        Source rows.
    predicates : tuple of callables
        Accumulated predicates, combined with AND.
    """

    collection: str
    rows: Tuple[Row, ...] = ()
    predicates: Tuple[Predicate, ...] = field(default=(), repr=False)

    @classmethod
    def from_records(
        cls, collection: str, records: Iterable[Mapping[str, Any]]
    ) -> RecordQuery:
        """Build a single-collection query from flat records."""
        return cls(collection, tuple({collection: dict(r)} for r in records))

    def primary_collection_name(self) -> str:
        return self.collection

    def _narrow(self, predicate: Predicate) -> RecordQuery:
        return RecordQuery(self.collection, self.rows, self.predicates + (predicate,))

    def with_equality_predicate(
        self, collection: str, column: str, value: Any
    ) -> RecordQuery:
        return self._narrow(lambda row: _lookup(row, collection, column) == value)

    def with_pattern_predicate(
        self, collection: str, column: str, value: Any
    ) -> RecordQuery:
        needle = str(value)

        def contains(row: Row) -> bool:
            found = _lookup(row, collection, column)
            return found is not None and needle in str(found)

        return self._narrow(contains)

    def all(self) -> List[Row]:
        """Evaluate every predicate and return the matching rows."""
        return [row for row in self.rows if all(p(row) for p in self.predicates)]

    def records(self) -> List[Mapping[str, Any]]:
        """Matching rows reduced to their primary-collection record."""
        return [row[self.collection] for row in self.all()]

    def count(self) -> int:
        return len(self.all())
