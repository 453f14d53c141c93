"""Declarative filter composition for chainable queries.

A filter set declares named filters once.  Given the runtime values of a
request, it narrows a query one predicate at a time, skipping every
filter whose value is missing or blank.

Modules
-------
matching
    Match kinds (exact, pattern) and the strategies that build their
    predicates.
filters
    Filter descriptors, the runner that resolves table qualifier and
    strategy, and filter sets with inheritable registries.
query
    The Queryable protocol, a SQLAlchemy ``Select`` adapter and an
    in-memory adapter.
database
    Engine and session management for running filtered statements.
config
    Environment-driven settings and logging setup.
exceptions
    Error hierarchy.
"""

from scopefilters.exceptions import (
    ConfigurationError,
    DatabaseError,
    ScopeFiltersError,
    UnsupportedMatchKind,
)
from scopefilters.filters import (
    FilterDescriptor,
    FilterRunner,
    FilterSet,
    FilterValues,
    define_filter_set,
)
from scopefilters.matching import MatchKind, strategy_for
from scopefilters.query import Queryable, RecordQuery, SelectQuery

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DatabaseError",
    "FilterDescriptor",
    "FilterRunner",
    "FilterSet",
    "FilterValues",
    "MatchKind",
    "Queryable",
    "RecordQuery",
    "ScopeFiltersError",
    "SelectQuery",
    "UnsupportedMatchKind",
    "define_filter_set",
    "strategy_for",
]
