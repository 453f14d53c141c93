"""
Match Strategies - predicate builders for each match kind.

Each strategy is stateless: it receives the query, the resolved
collection and column, and the raw value, and returns a new query with
exactly one predicate appended.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict

from scopefilters.exceptions import UnsupportedMatchKind
from scopefilters.matching._kinds import MatchKind

if TYPE_CHECKING:
    from scopefilters.query import Queryable


class MatchStrategy(ABC):
    """
    Abstract base class for match strategies.

    Subclasses implement:
    - kind: the MatchKind they serve
    - apply(): append one predicate to the query
    """

    @property
    @abstractmethod
    def kind(self) -> MatchKind:
        """MatchKind handled by this strategy."""

    @property
    def name(self) -> str:
        """Human-readable strategy name."""
        return self.__class__.__name__

    @abstractmethod
    def apply(
        self, query: Queryable, collection: str, column: str, value: Any
    ) -> Queryable:
        """
        Append one predicate for ``collection.column`` to the query.

        Args:
            query: Queryable to narrow
            collection: Collection (table) name qualifying the column
            column: Column name to compare
            value: Raw filter value, passed through as a bound parameter

        Returns:
            A new Queryable; the input is never mutated
        """

    def __repr__(self) -> str:
        return f"{self.name}()"


class ExactMatch(MatchStrategy):
    """Equality predicate: ``collection.column = value``."""

    @property
    def kind(self) -> MatchKind:
        return MatchKind.EXACT

    def apply(
        self, query: Queryable, collection: str, column: str, value: Any
    ) -> Queryable:
        return query.with_equality_predicate(collection, column, value)


class PatternMatch(MatchStrategy):
    """Substring predicate: ``collection.column LIKE '%value%'``.

    Wildcards wrap the value only. Case sensitivity follows the store's
    collation.
    """

    @property
    def kind(self) -> MatchKind:
        return MatchKind.PATTERN

    def apply(
        self, query: Queryable, collection: str, column: str, value: Any
    ) -> Queryable:
        return query.with_pattern_predicate(collection, column, value)


_STRATEGIES: Dict[MatchKind, MatchStrategy] = {
    MatchKind.EXACT: ExactMatch(),
    MatchKind.PATTERN: PatternMatch(),
}


def strategy_for(match: Any) -> MatchStrategy:
    """
    Resolve the strategy for a match kind.

    Args:
        match: A MatchKind member

    Returns:
        The shared MatchStrategy instance for that kind

    Raises:
        UnsupportedMatchKind: ``match`` is not a MatchKind member
            (``None`` and strings included)
    """
    if not isinstance(match, MatchKind):
        raise UnsupportedMatchKind(match)
    return _STRATEGIES[match]
