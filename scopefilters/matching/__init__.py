"""Match kinds and the predicate strategies that implement them."""

from scopefilters.matching._kinds import MatchKind
from scopefilters.matching._strategies import (
    ExactMatch,
    MatchStrategy,
    PatternMatch,
    strategy_for,
)

__all__ = [
    "ExactMatch",
    "MatchKind",
    "MatchStrategy",
    "PatternMatch",
    "strategy_for",
]
