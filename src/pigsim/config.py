"""Tournament configuration for pigsim.

Settings come from environment variables, with command-line flags taking
precedence. ``load_settings`` reads the environment; ``TournamentSettings``
validates the combined values.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from pigsim.parameters import GAMES_PER_SERIES, WIN_SCORE

# Default configuration (can be overridden via environment variables)
DEFAULT_LOG_LEVEL = "WARNING"

ENV_GAMES_PER_SERIES = "PIGSIM_GAMES_PER_SERIES"
ENV_WIN_SCORE = "PIGSIM_WIN_SCORE"
ENV_MAX_WORKERS = "PIGSIM_MAX_WORKERS"
ENV_SEED = "PIGSIM_SEED"
ENV_LOG_LEVEL = "PIGSIM_LOG_LEVEL"


class TournamentSettings(BaseModel):
    """Validated tournament settings.

    Attributes:
        games_per_series: Games played between each pair of strategies
        win_score: Winning score (also sizes the default strategy line-up)
        max_workers: Process pool size, None for the CPU count
        seed: Base random seed, None for OS entropy
        log_level: Logging level name
    """

    games_per_series: int = Field(default=GAMES_PER_SERIES, ge=1)
    win_score: int = Field(default=WIN_SCORE, ge=1)
    max_workers: Optional[int] = Field(default=None, ge=1)
    seed: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level and reject unknown names."""
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def _env_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(**overrides) -> TournamentSettings:
    """Build settings from the environment, then apply non-None overrides.

    Args:
        **overrides: Field values that take precedence over the environment

    Returns:
        TournamentSettings instance

    Raises:
        ValueError: If an environment variable or override is invalid
    """
    values: dict = {}
    env_values = {
        "games_per_series": _env_int(ENV_GAMES_PER_SERIES),
        "win_score": _env_int(ENV_WIN_SCORE),
        "max_workers": _env_int(ENV_MAX_WORKERS),
        "seed": _env_int(ENV_SEED),
        "log_level": os.environ.get(ENV_LOG_LEVEL),
    }
    for key, value in env_values.items():
        if value is not None:
            values[key] = value
    for key, value in overrides.items():
        if value is not None:
            values[key] = value
    return TournamentSettings(**values)
