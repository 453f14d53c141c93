"""Filter descriptors, the filter runner and filter sets."""

from scopefilters.filters._descriptor import FilterDescriptor
from scopefilters.filters._filter_set import FilterSet, define_filter_set
from scopefilters.filters._keys import FilterValues, canonical_name, is_blank, normalize_key
from scopefilters.filters._runner import FilterRunner

__all__ = [
    "FilterDescriptor",
    "FilterRunner",
    "FilterSet",
    "FilterValues",
    "canonical_name",
    "define_filter_set",
    "is_blank",
    "normalize_key",
]
