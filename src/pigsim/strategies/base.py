"""Base strategy interface for pigsim.

This module defines the abstract base class for all strategies along with
factory functions for building strategies from their names.
"""

from __future__ import annotations

import random
import re
from abc import ABC, abstractmethod

from pigsim.models.actions import ActionKind
from pigsim.models.score import Score


class Strategy(ABC):
    """Abstract base class for all Pig strategies.

    A strategy is a stateless policy: it maps the Score seen by the acting
    player to an action. The same instance is reused for many games (and is
    pickled into worker processes), so subclasses must keep any parameters
    immutable and must not remember anything between calls.

    Subclasses:
        - StayAtK: roll until the turn total reaches k, then stay
        - RandomStrategy: coin flip between roll and stay
    """

    @abstractmethod
    def choose_action(self, score: Score, rng: random.Random) -> ActionKind:
        """Choose the next action for the acting player.

        Args:
            score: Current score from the acting player's perspective
            rng: Random generator for strategies that randomize

        Returns:
            The chosen action
        """

    @abstractmethod
    def label(self) -> str:
        """Return the display name used in reports."""

    def __str__(self) -> str:
        return self.label()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.label()!r}>"


_STAY_AT_PATTERN = re.compile(r"^stay_?at_?(\d+)$")


def get_strategy_by_type(strategy_type: str) -> Strategy:
    """Create a strategy from its type name.

    Accepts ``random`` and ``stay_at_<k>`` (hyphens, spaces and case are
    ignored, so ``Stay at 20`` and ``stay-at-20`` also work).

    Args:
        strategy_type: Name of the strategy to create

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy type is unknown
    """
    # Import here to avoid circular imports
    from pigsim.strategies.policies import RandomStrategy, StayAtK

    type_name = strategy_type.strip().lower().rstrip("!").replace("-", "_").replace(" ", "_")

    if type_name == "random":
        return RandomStrategy()

    match = _STAY_AT_PATTERN.match(type_name)
    if match:
        return StayAtK(int(match.group(1)))

    raise ValueError(
        f"Unknown strategy type: {strategy_type}. "
        f"Valid types: {list_strategy_types()}"
    )


def list_strategy_types() -> list[str]:
    """List the accepted strategy type names."""
    return ["stay_at_<k>", "random"]
