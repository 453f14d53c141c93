"""Queryable protocol and the adapters shipped with the library."""

from scopefilters.query._protocol import Queryable
from scopefilters.query._records import RecordQuery
from scopefilters.query._select import SelectQuery

__all__ = [
    "Queryable",
    "RecordQuery",
    "SelectQuery",
]
