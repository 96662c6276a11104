"""Single-game simulator for Pig.

Drives one game between two strategies from an empty Score until the acting
player's banked score plus turn total reaches the winning score.

The winner is the player who is active when the loop exits: the player whose
roll lifts banked score plus turn total to the winning score. The winning turn
total is never banked, and the exit check only ever looks at the acting
player's totals.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from pigsim.models.actions import apply_action
from pigsim.models.score import Score
from pigsim.parameters import WIN_SCORE
from pigsim.strategies.base import Strategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameResult:
    """Outcome of one simulated game.

    Attributes:
        winner: Index of the winning strategy (0 or 1)
        starting_player: Index of the strategy that acted first
        actions: Number of actions applied
        turns: Number of completed turns
        final_score: Score at loop exit, from the winner's perspective
    """

    winner: int
    starting_player: int
    actions: int
    turns: int
    final_score: Score


def run_game(
    strategy_a: Strategy,
    strategy_b: Strategy,
    rng: Optional[random.Random] = None,
    win: int = WIN_SCORE,
) -> GameResult:
    """Run a single game between two strategies.

    There is no cap on the number of actions: the game ends with
    probability 1 and a cap would bias the outcome distribution.

    Args:
        strategy_a: Strategy for index 0
        strategy_b: Strategy for index 1
        rng: Random generator for dice, the starting player and randomized
            strategies (a fresh OS-seeded generator if not provided)
        win: Winning score

    Returns:
        GameResult describing the finished game
    """
    if rng is None:
        rng = random.Random()

    strategies = (strategy_a, strategy_b)
    score = Score()
    current = rng.randrange(2)
    starting_player = current
    actions = 0
    turns = 0

    while score.turn_total < win:
        kind = strategies[current].choose_action(score, rng)
        score, turn_is_over = apply_action(kind, score, rng)
        actions += 1
        if turn_is_over:
            current = 1 - current
            turns += 1

    logger.debug(
        "Game %s vs %s won by %d after %d actions",
        strategy_a,
        strategy_b,
        current,
        actions,
    )

    return GameResult(
        winner=current,
        starting_player=starting_player,
        actions=actions,
        turns=turns,
        final_score=score,
    )


def play(
    strategy_a: Strategy,
    strategy_b: Strategy,
    rng: Optional[random.Random] = None,
    win: int = WIN_SCORE,
) -> int:
    """Simulate a Pig game and return the winner (0 or 1)."""
    return run_game(strategy_a, strategy_b, rng=rng, win=win).winner
