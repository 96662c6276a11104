"""Concrete Pig strategies.

Two reference policies are provided: a threshold policy that rolls until the
turn total reaches a fixed value, and a policy that flips a coin every time.
"""

from __future__ import annotations

import random

from pigsim.models.actions import ActionKind
from pigsim.models.score import Score
from pigsim.parameters import RANDOM_STAY_PROBABILITY, WIN_SCORE
from pigsim.strategies.base import Strategy


class StayAtK(Strategy):
    """Threshold strategy: roll until this_turn is at least k, then stay."""

    def __init__(self, k: int) -> None:
        if k < 1:
            raise ValueError(f"k must be >= 1, got {k}")
        self._k = int(k)

    @property
    def k(self) -> int:
        """Turn total at which this strategy stays."""
        return self._k

    def choose_action(self, score: Score, rng: random.Random) -> ActionKind:
        if score.this_turn >= self._k:
            return ActionKind.STAY
        return ActionKind.ROLL

    def label(self) -> str:
        return f"Stay at {self._k}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StayAtK):
            return NotImplemented
        return self._k == other._k

    def __hash__(self) -> int:
        return hash((StayAtK, self._k))


class RandomStrategy(Strategy):
    """Stay or roll with equal probability, independently on every decision."""

    def choose_action(self, score: Score, rng: random.Random) -> ActionKind:
        if rng.random() > 1.0 - RANDOM_STAY_PROBABILITY:
            return ActionKind.STAY
        return ActionKind.ROLL

    def label(self) -> str:
        return "Random!"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RandomStrategy)

    def __hash__(self) -> int:
        return hash(RandomStrategy)


def default_strategies(win: int = WIN_SCORE) -> list[Strategy]:
    """Build the reference line-up: StayAtK(1) .. StayAtK(win) plus Random.

    Args:
        win: Winning score; one threshold strategy is created per value 1..win

    Returns:
        List of win + 1 strategies, threshold strategies first
    """
    strategies: list[Strategy] = [StayAtK(k) for k in range(1, win + 1)]
    strategies.append(RandomStrategy())
    return strategies
