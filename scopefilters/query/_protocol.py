"""
Queryable Protocol - the query capability filters are applied to.

Any data-access layer can be driven by a filter set as long as it offers
these three operations and never mutates itself when narrowed.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Queryable(Protocol):
    """
    Protocol for immutable, chainable queries.

    Implementations must return a new query from every ``with_*`` call,
    which lets a filter set fold predicates one after another and keep
    the original query intact.
    """

    def primary_collection_name(self) -> str:
        """Name of the collection (table) the query is rooted at."""
        ...

    def with_equality_predicate(
        self, collection: str, column: str, value: Any
    ) -> "Queryable":
        """Return a new query narrowed by ``collection.column = value``."""
        ...

    def with_pattern_predicate(
        self, collection: str, column: str, value: Any
    ) -> "Queryable":
        """Return a new query narrowed by ``collection.column LIKE %value%``."""
        ...
