"""
Filter Set - a registry of filter descriptors folded over a query.

Subclasses declare their filters once; instances carry the runtime
values and apply every registered filter, in registration order, to a
query.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Type, TypeVar

from sqlalchemy import Select

from scopefilters.filters._descriptor import FilterDescriptor
from scopefilters.filters._keys import FilterValues, is_blank
from scopefilters.matching import MatchKind
from scopefilters.query import Queryable, SelectQuery

logger = logging.getLogger(__name__)

Q = TypeVar("Q")


class FilterSet:
    """
    Base class for reusable filter sets.

    Each subclass gets its own registry, seeded with a copy of its
    parents' registries when the subclass is defined (with several
    bases, the first base wins a shared key).  Registering a key that is
    already inherited replaces it for the subclass only.

    Filters can be declared as class attributes or registered with
    :meth:`filter_by`:

        class DocumentFilters(FilterSet):
            name = FilterDescriptor("name", match=MatchKind.PATTERN)
            status = FilterDescriptor("status")

        DocumentFilters.filter_by("tag", column="name", table="tags")

        filters = DocumentFilters(name="report", status="published")
        statement = filters.apply(select(Document))
        # WHERE documents.name LIKE '%report%' AND documents.status = 'published'
    """

    _filter_configs: ClassVar[Dict[str, FilterDescriptor]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        configs: Dict[str, FilterDescriptor] = {}
        # Earlier bases in the MRO take precedence over later ones.
        for base in cls.__mro__[1:]:
            for key, descriptor in vars(base).get("_filter_configs", {}).items():
                configs.setdefault(key, descriptor)
        for attribute in vars(cls).values():
            if isinstance(attribute, FilterDescriptor):
                configs[attribute.key] = attribute
        cls._filter_configs = configs

    @classmethod
    def filter_by(
        cls,
        key: Any,
        *,
        match: MatchKind = MatchKind.EXACT,
        column: Any = None,
        table: Any = None,
    ) -> FilterDescriptor:
        """
        Register a filter on this class.

        Args:
            key: Value-map key (and default column)
            match: MatchKind.EXACT (default) or MatchKind.PATTERN
            column: Column name when it differs from ``key``
            table: Qualifier pinning the column to a joined table

        Returns:
            The registered FilterDescriptor

        Raises:
            UnsupportedMatchKind: ``match`` is not a MatchKind member
        """
        descriptor = FilterDescriptor(key, match=match, column=column, table=table)
        cls._filter_configs[descriptor.key] = descriptor
        return descriptor

    @classmethod
    def filter_configs(cls) -> Mapping[str, FilterDescriptor]:
        """Read-only view of this class's descriptors, keyed by filter key."""
        return MappingProxyType(cls._filter_configs)

    def __init__(self, values: Optional[Mapping[Any, Any]] = None, **kwargs: Any):
        self._values = FilterValues(values, **kwargs)

    @property
    def values(self) -> FilterValues:
        return self._values

    def apply(self, scope: Q) -> Q:
        """
        Apply every registered filter to ``scope``, in registration order.

        Args:
            scope: A Queryable, or a SQLAlchemy Select (wrapped in
                SelectQuery for the fold and unwrapped on return)

        Returns:
            The narrowed query, of the same kind as ``scope``.  When no
            filter has a usable value the very same object is returned.

        Raises:
            UnsupportedMatchKind: a descriptor's match kind has no strategy;
                nothing is returned in that case
        """
        if isinstance(scope, Select):
            return self._fold(SelectQuery(scope)).statement
        return self._fold(scope)

    def _fold(self, query: Queryable) -> Any:
        result = query
        for descriptor in self._filter_configs.values():
            result = descriptor.apply(result, self._values)

        if result is not query:
            logger.debug(
                f"{self.__class__.__name__} applied filters: "
                f"{', '.join(d.key for d in self.active_filters())}"
            )
        return result

    def active_filters(self) -> List[FilterDescriptor]:
        """Descriptors that have a usable (non-blank) value in this instance."""
        return [
            descriptor
            for descriptor in self._filter_configs.values()
            if not is_blank(self._values.get(descriptor.key))
        ]

    def get_config_summary(self) -> Dict[str, Any]:
        """Dictionary describing the filter set and its descriptors."""
        return {
            "name": self.__class__.__name__,
            "filter_count": len(self._filter_configs),
            "filters": [d.get_config_summary() for d in self._filter_configs.values()],
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(values={dict(self._values)!r})"


F = TypeVar("F", bound=FilterSet)


def define_filter_set(
    name: str,
    descriptors: Iterable[FilterDescriptor],
    base: Type[F] = FilterSet,  # type: ignore[assignment]
) -> Type[F]:
    """
    Build a FilterSet subclass from an explicit list of descriptors.

    The new class inherits ``base``'s filters; descriptors listed here
    replace inherited ones with the same key.

    Args:
        name: Class name of the new filter set
        descriptors: Descriptors to register, in order
        base: Parent filter set

    Returns:
        The new FilterSet subclass
    """
    filter_set = type(name, (base,), {"__module__": base.__module__})
    for descriptor in descriptors:
        filter_set._filter_configs[descriptor.key] = descriptor
    return filter_set
