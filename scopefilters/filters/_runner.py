"""Filter runner: resolves qualifier and strategy for one filter application."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from scopefilters.filters._keys import is_blank
from scopefilters.matching import strategy_for

if TYPE_CHECKING:
    from scopefilters.filters._descriptor import FilterDescriptor
    from scopefilters.query import Queryable

logger = logging.getLogger(__name__)


class FilterRunner:
    """
    Applies one descriptor with one value to one query.

    The qualifier is the descriptor's ``table`` when set, otherwise the
    query's primary collection.  A query rooted at ``documents`` joined
    with ``tags`` therefore filters ``documents.name`` by default and
    ``tags.name`` only when the descriptor pins ``table="tags"``.

    Example:
        runner = FilterRunner(FilterDescriptor("name"), query, "report")
        narrowed = runner.apply()
    """

    def __init__(self, filter: FilterDescriptor, query: Queryable, value: Any):
        self._filter = filter
        self._query = query
        self._value = value

    @property
    def filter(self) -> FilterDescriptor:
        return self._filter

    @property
    def query(self) -> Queryable:
        return self._query

    @property
    def value(self) -> Any:
        return self._value

    @property
    def table_name(self) -> str:
        """Effective qualifier for the column."""
        if self._filter.table is not None:
            return self._filter.table
        return self._query.primary_collection_name()

    @property
    def column(self) -> str:
        return self._filter.column

    def apply(self) -> Queryable:
        """
        Append the filter's predicate to the query.

        Returns:
            The original query for a ``None`` or ``""`` value, otherwise
            the strategy's narrowed query

        Raises:
            UnsupportedMatchKind: descriptor carries an unknown match kind
        """
        if is_blank(self._value):
            return self._query

        strategy = strategy_for(self._filter.match)
        table_name = self.table_name
        logger.debug(
            f"Applying {strategy.name} on {table_name}.{self.column} "
            f"for filter '{self._filter.key}'"
        )
        return strategy.apply(self._query, table_name, self.column, self._value)

    def __repr__(self) -> str:
        return f"FilterRunner(filter={self._filter!r}, value={self._value!r})"
