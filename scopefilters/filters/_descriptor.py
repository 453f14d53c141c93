"""Filter descriptor: static configuration for one filterable field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from scopefilters.filters._keys import FilterValues, canonical_name, is_blank
from scopefilters.filters._runner import FilterRunner
from scopefilters.matching import MatchKind, strategy_for

if TYPE_CHECKING:
    from scopefilters.query import Queryable


@dataclass(frozen=True)
class FilterDescriptor:
    """Immutable description of one filter.

    Safe to share between filter sets and threads.  The match kind is
    checked when the descriptor is built, so an unsupported kind fails at
    definition time rather than on the first request.

    Parameters
    ----------
    key : str
        Name looked up in the value map.  Enum members are accepted and
        stand for their value.
    match : MatchKind
        ``MatchKind.EXACT`` (default) or ``MatchKind.PATTERN``.
    column : str or None
        Column to filter on.  Defaults to ``key``.
    table : str, Table, model class or None
        Collection qualifying the column.  When ``None`` the query's
        primary collection is used at apply time; set it to pin a column
        of a joined table.

    Examples
    --------
    >>> FilterDescriptor("name", match=MatchKind.PATTERN).column
    'name'
    >>> FilterDescriptor("user_name", column="full_name").column
    'full_name'
    """

    key: str
    match: MatchKind = MatchKind.EXACT
    column: Optional[str] = None
    table: Optional[str] = None

    def __post_init__(self) -> None:
        strategy_for(self.match)

        key = canonical_name(self.key, "key")
        column = key if self.column is None else canonical_name(self.column, "column")
        table = None if self.table is None else canonical_name(self.table, "table")

        object.__setattr__(self, "key", key)
        object.__setattr__(self, "column", column)
        object.__setattr__(self, "table", table)

    def apply(self, query: Queryable, values: Mapping[Any, Any]) -> Queryable:
        """
        Narrow ``query`` by this filter's value from ``values``.

        Args:
            query: Queryable to narrow
            values: Value map; raw mappings are normalized on the fly

        Returns:
            ``query`` itself when the value is missing, ``None`` or ``""``;
            otherwise a new, narrowed query
        """
        if not isinstance(values, FilterValues):
            values = FilterValues(values)

        value = values.get(self.key)
        if is_blank(value):
            return query
        return FilterRunner(self, query, value).apply()

    def get_config_summary(self) -> Dict[str, Any]:
        """Plain-dict description of the descriptor."""
        return {
            "key": self.key,
            "match": self.match.value,
            "column": self.column,
            "table": self.table,
        }
