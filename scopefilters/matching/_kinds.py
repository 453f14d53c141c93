"""Match kinds supported by filter descriptors."""

from __future__ import annotations

from enum import Enum


class MatchKind(Enum):
    """How a filter value is compared against its column.

    Plain ``Enum`` rather than ``str, Enum``: a kind spelled as text
    (``"exact"``) is not a kind and is rejected by :func:`strategy_for`.
    """

    EXACT = "exact"
    PATTERN = "like"
