"""Strategy implementations for pigsim.

All strategies implement the Strategy base class interface:
``choose_action(score, rng)`` and ``label()``.
"""

from pigsim.strategies.base import (
    Strategy,
    get_strategy_by_type,
    list_strategy_types,
)
from pigsim.strategies.policies import (
    RandomStrategy,
    StayAtK,
    default_strategies,
)

__all__ = [
    "Strategy",
    "get_strategy_by_type",
    "list_strategy_types",
    "RandomStrategy",
    "StayAtK",
    "default_strategies",
]
