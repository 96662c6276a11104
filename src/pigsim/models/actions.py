"""Action primitives for Pig.

An action is a transition rule ``(Score, rng) -> (Score, turn_ended)``. There
are exactly two of them:

- roll: draw a die. A 1 forfeits the turn total and passes the turn, any other
  face is added to the turn total and the same player continues.
- stay: bank the turn total and pass the turn.

Both are pure functions of the given Score and the random generator; neither
reads or writes any other state.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Callable

from pigsim.models.score import Score
from pigsim.parameters import DIE_SIDES, PIG_OUT_FACE


class ActionKind(str, Enum):
    """The two choices a strategy can make.

    Inherits from str for proper JSON serialization.
    """

    ROLL = "roll"
    STAY = "stay"


ActionResult = tuple[Score, bool]
ActionFn = Callable[[Score, random.Random], ActionResult]


def roll(score: Score, rng: random.Random) -> ActionResult:
    """Simulate one die roll.

    Makes exactly one draw from ``rng``.

    Args:
        score: Current score from the acting player's perspective
        rng: Random generator to draw the die face from

    Returns:
        Tuple of (new score, whether the turn is over)
    """
    outcome = rng.randint(1, DIE_SIDES)
    if outcome == PIG_OUT_FACE:
        return score.swapped(), True
    return Score(score.player, score.opponent, score.this_turn + outcome), False


def stay(score: Score, rng: random.Random | None = None) -> ActionResult:
    """Bank the turn total and pass the turn. Never draws from ``rng``."""
    return score.banked(), True


ACTIONS: dict[ActionKind, ActionFn] = {
    ActionKind.ROLL: roll,
    ActionKind.STAY: stay,
}


def apply_action(kind: ActionKind, score: Score, rng: random.Random) -> ActionResult:
    """Apply the action named by ``kind`` to ``score``.

    Args:
        kind: Action chosen by a strategy
        score: Current score from the acting player's perspective
        rng: Random generator used by stochastic actions

    Returns:
        Tuple of (new score, whether the turn is over)

    Raises:
        ValueError: If kind is not a known action
    """
    try:
        action = ACTIONS[ActionKind(kind)]
    except ValueError:
        raise ValueError(
            f"Unknown action: {kind!r}. Valid actions: {[a.value for a in ActionKind]}"
        ) from None
    return action(score, rng)
