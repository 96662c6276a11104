"""Game and tournament parameters for pigsim.

This module is the single home for the numeric constants of the game of Pig
and of the reference round-robin tournament.

Usage:
    from pigsim.parameters import WIN_SCORE, GAMES_PER_SERIES
"""

# =============================================================================
# GAME PARAMETERS
# =============================================================================

WIN_SCORE = 100
"""Score a player must reach to win a game of Pig.

Current: 100

Analysis:
    The game loop keeps going while the acting player's banked score plus the
    current turn total is below this value. The reference strategy line-up is
    StayAtK(1) .. StayAtK(WIN_SCORE) plus one random policy, so this value
    also fixes the size of the default tournament (WIN_SCORE + 1 strategies).
"""

DIE_SIDES = 6
"""Number of faces on the die. Rolls are uniform in [1, DIE_SIDES]."""

PIG_OUT_FACE = 1
"""Die face that forfeits the turn total and passes the turn."""


# =============================================================================
# STRATEGY PARAMETERS
# =============================================================================

RANDOM_STAY_PROBABILITY = 0.5
"""Probability that the random strategy stays instead of rolling.

The random strategy stays when a uniform draw in [0, 1) is strictly greater
than 1 - RANDOM_STAY_PROBABILITY, so a draw of exactly 0.5 rolls.
"""


# =============================================================================
# TOURNAMENT PARAMETERS
# =============================================================================

GAMES_PER_SERIES = 10
"""Games played between every pair of strategies in a round robin.

Current: 10

Analysis:
    With the reference line-up of 101 strategies there are 5050 pairings,
    i.e. 50,500 games, and every strategy plays 1000 games.

Tuning:
    - Raise for tighter win-rate estimates (error shrinks with sqrt(games))
    - Total work grows as GAMES_PER_SERIES * n * (n - 1) / 2
"""
