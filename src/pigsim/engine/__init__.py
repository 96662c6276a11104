"""Game engine for pigsim.

Exports the single-game simulator.
"""

from pigsim.engine.game import GameResult, play, run_game

__all__ = [
    "GameResult",
    "play",
    "run_game",
]
