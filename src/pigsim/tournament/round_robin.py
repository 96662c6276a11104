"""Round-robin tournament runner for pigsim.

Every pair of strategies plays one series of games. The work is fanned out
with one unit per strategy index: worker ``i`` plays every pairing (i, j) with
j > i, so no two workers ever touch the same pair. Each worker tallies wins
into a private vector as long as the full strategy list; the orchestrator
waits for all of them and sums the vectors element-wise. Parallelism is
achieved through ProcessPoolExecutor, and the sum does not depend on the
order in which workers finish.

Usage:
    from pigsim.strategies import default_strategies
    from pigsim.tournament import round_robin

    result = round_robin(default_strategies(), games_per_series=10)
    print(result.wins, result.games_per_strategy)
"""

from __future__ import annotations

import datetime
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Optional, Sequence

from pydantic import BaseModel, Field, model_validator

from pigsim.engine.game import play
from pigsim.parameters import GAMES_PER_SERIES, WIN_SCORE
from pigsim.strategies.base import Strategy

logger = logging.getLogger(__name__)


class TournamentResult(BaseModel):
    """Aggregated win counts from a round robin.

    Attributes:
        strategies: Strategy labels, in tournament order
        wins: Win count per strategy, indexed like ``strategies``
        games_per_series: Games played between each pair
        games_per_strategy: Games played by every strategy
        timestamp: ISO time the tournament started
        duration_seconds: Wall-clock duration of the run
    """

    strategies: list[str]
    wins: list[int]
    games_per_series: int = Field(ge=1)
    games_per_strategy: int = Field(ge=0)
    timestamp: str = ""
    duration_seconds: float = Field(default=0.0, ge=0.0)

    @model_validator(mode="after")
    def check_totals(self) -> TournamentResult:
        """Every game produces exactly one win."""
        n = len(self.strategies)
        if len(self.wins) != n:
            raise ValueError(f"expected {n} win counts, got {len(self.wins)}")
        if any(w < 0 for w in self.wins):
            raise ValueError("win counts must be >= 0")
        expected_total = self.games_per_series * n * (n - 1) // 2
        if sum(self.wins) != expected_total:
            raise ValueError(
                f"win total mismatch: expected {expected_total}, got {sum(self.wins)}"
            )
        expected_per_strategy = self.games_per_series * (n - 1)
        if self.games_per_strategy != expected_per_strategy:
            raise ValueError(
                f"games_per_strategy mismatch: expected {expected_per_strategy}, "
                f"got {self.games_per_strategy}"
            )
        return self

    @property
    def win_counts(self) -> dict[int, int]:
        """Mapping from strategy index to win count."""
        return dict(enumerate(self.wins))

    @property
    def total_games(self) -> int:
        """Number of games played in the whole tournament."""
        return sum(self.wins)

    def losses(self, index: int) -> int:
        """Games lost by the strategy at ``index``."""
        return self.games_per_strategy - self.wins[index]

    def win_rate(self, index: int) -> float:
        """Fraction of its games won by the strategy at ``index``."""
        return self.wins[index] / self.games_per_strategy


def run_series(
    strategies: Sequence[Strategy],
    index: int,
    games_per_series: int = GAMES_PER_SERIES,
    seed: Optional[int] = None,
    win: int = WIN_SCORE,
) -> list[int]:
    """Play every pairing in which ``index`` is the lower strategy index.

    This is the worker function submitted to the process pool. It builds its
    own random generator, so workers never share one.

    Args:
        strategies: Full strategy sequence
        index: Index of the strategy this worker is responsible for
        games_per_series: Games per pairing
        seed: Generator seed for this worker (OS entropy if None)
        win: Winning score

    Returns:
        Win counts as long as ``strategies``; only ``index`` and higher
        positions can be non-zero
    """
    rng = random.Random(seed)
    win_count = [0] * len(strategies)
    for j in range(index + 1, len(strategies)):
        for _ in range(games_per_series):
            winner = play(strategies[index], strategies[j], rng=rng, win=win)
            if winner == 0:
                win_count[index] += 1
            else:
                win_count[j] += 1
    return win_count


def _worker_seed(seed: Optional[int], index: int) -> Optional[int]:
    return (seed + index) if seed is not None else None


def round_robin(
    strategies: Sequence[Strategy],
    games_per_series: int = GAMES_PER_SERIES,
    *,
    max_workers: Optional[int] = None,
    seed: Optional[int] = None,
    win: int = WIN_SCORE,
) -> TournamentResult:
    """Simulate a series of games between every pair of strategies.

    Args:
        strategies: Ordered strategy sequence (at least two)
        games_per_series: Games per pairing (at least one)
        max_workers: Process pool size (default: CPU count). With 1 the
            workers run sequentially in this process.
        seed: Base seed; worker ``i`` uses ``seed + i``. Without a seed every
            worker draws its own seed from OS entropy.
        win: Winning score

    Returns:
        TournamentResult with summed win counts

    Raises:
        ValueError: If fewer than two strategies or games_per_series < 1
    """
    strategies = list(strategies)
    n = len(strategies)
    if n < 2:
        raise ValueError(f"round robin needs at least 2 strategies, got {n}")
    if games_per_series < 1:
        raise ValueError(f"games_per_series must be >= 1, got {games_per_series}")

    start_time = time.time()
    timestamp = datetime.datetime.now().isoformat()
    logger.info(
        "Starting round robin: %d strategies, %d games per series, workers=%s",
        n,
        games_per_series,
        max_workers if max_workers is not None else "auto",
    )

    wins = [0] * n

    if max_workers == 1:
        # Sequential execution
        for i in range(n):
            vector = run_series(strategies, i, games_per_series, _worker_seed(seed, i), win)
            wins = [total + count for total, count in zip(wins, vector)]
    else:
        # Parallel execution using ProcessPoolExecutor
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            futures = {}
            received = 0
            for i in range(n):
                future = executor.submit(
                    run_series,
                    strategies,
                    i,
                    games_per_series,
                    _worker_seed(seed, i),
                    win,
                )
                futures[future] = i

            # Collect results
            for future in as_completed(futures):
                vector = future.result()
                wins = [total + count for total, count in zip(wins, vector)]
                received += 1
                logger.debug(
                    "Worker %d finished (%d/%d), %d wins",
                    futures[future],
                    received,
                    n,
                    sum(vector),
                )

    duration = time.time() - start_time
    logger.info("Round robin finished: %d games in %.2fs", sum(wins), duration)

    return TournamentResult(
        strategies=[s.label() for s in strategies],
        wins=wins,
        games_per_series=games_per_series,
        games_per_strategy=games_per_series * (n - 1),  # no self play
        timestamp=timestamp,
        duration_seconds=duration,
    )
