"""Score model for a game of Pig.

A Score is always seen from the perspective of the player about to act:
``player`` is their banked score, ``opponent`` the other player's banked
score and ``this_turn`` the points accumulated in the current turn.

Scores are immutable. Every action returns a new Score, so a single value can
be shared freely between the simulator, strategies and tests.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Score:
    """Banked scores for both players plus the active turn total.

    Kept as a plain frozen dataclass rather than a pydantic model: the
    simulator builds millions of these per tournament.

    Attributes:
        player: Banked score of the player about to act
        opponent: Banked score of the other player
        this_turn: Points accumulated so far in the current turn
    """

    player: int = 0
    opponent: int = 0
    this_turn: int = 0

    def __post_init__(self) -> None:
        """Validate that no component is negative."""
        if self.player < 0 or self.opponent < 0 or self.this_turn < 0:
            raise ValueError(
                f"Score components must be >= 0, got "
                f"({self.player}, {self.opponent}, {self.this_turn})"
            )

    @property
    def turn_total(self) -> int:
        """Banked score plus the current turn total for the acting player."""
        return self.player + self.this_turn

    def swapped(self) -> Score:
        """Hand the turn over without banking anything."""
        return Score(self.opponent, self.player, 0)

    def banked(self) -> Score:
        """Bank the turn total and hand the turn over."""
        return Score(self.opponent, self.player + self.this_turn, 0)
