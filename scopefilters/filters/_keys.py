"""Key normalization and the read-only filter value map."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional

from sqlalchemy import Table

from scopefilters.exceptions import ConfigurationError


def normalize_key(key: Any) -> Any:
    """Canonical form of a value-map key.

    Strings are interned and Enum members stand for their value, so
    ``"status"`` and ``Field.STATUS`` (value ``"status"``) find the same
    filter.  Anything else is returned unchanged and simply never matches.
    """
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, str):
        return sys.intern(str(key))
    return key


def canonical_name(value: Any, label: str) -> str:
    """Canonical string for a filter key, column or table.

    Accepts a string, an Enum member with a string value, a SQLAlchemy
    ``Table`` or a declarative model class.
    """
    if isinstance(value, Enum):
        value = value.value
    elif isinstance(value, Table):
        value = value.name
    elif isinstance(getattr(value, "__tablename__", None), str):
        value = value.__tablename__

    if not isinstance(value, str):
        raise ConfigurationError(
            f"{label} must be a string, Enum, Table or model class, got {value!r}"
        )
    if not value:
        raise ConfigurationError(f"{label} must not be empty")
    return sys.intern(str(value))


def is_blank(value: Any) -> bool:
    """True for values a filter skips: ``None`` and the empty string."""
    return value is None or (isinstance(value, str) and value == "")


class FilterValues(Mapping[Any, Any]):
    """
    Read-only runtime values of a filter set, keyed by normalized key.

    Built once per filter set instance; string and Enum keys for the same
    name collapse to one entry (the later one wins).
    """

    __slots__ = ("_data",)

    def __init__(self, values: Optional[Mapping[Any, Any]] = None, **kwargs: Any):
        data: Dict[Any, Any] = {}
        for source in (values or {}, kwargs):
            for key, value in source.items():
                data[normalize_key(key)] = value
        self._data = data

    def __getitem__(self, key: Any) -> Any:
        return self._data[normalize_key(key)]

    def __contains__(self, key: object) -> bool:
        return normalize_key(key) in self._data

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FilterValues({self._data!r})"
