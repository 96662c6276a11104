"""Text reporting for round-robin results."""

from __future__ import annotations

from pigsim.tournament.round_robin import TournamentResult


def ratio_string(*values: int) -> str:
    """List each value with its share of the sum of all values.

    e.g., ratio_string(1, 2, 3) == "1/6 (16.7%), 2/6 (33.3%), 3/6 (50.0%)"

    Raises:
        ValueError: If no values are given or they sum to zero
    """
    total = sum(values)
    if total == 0:
        raise ValueError(f"ratio needs a positive total, got values {values}")
    parts = []
    for value in values:
        pct = 100 * value / total
        parts.append(f"{value}/{total} ({pct:.1f}%)")
    return ", ".join(parts)


def format_report(result: TournamentResult) -> list[str]:
    """One "Wins, losses" line per strategy, in tournament order."""
    lines = []
    for i, label in enumerate(result.strategies):
        lines.append(f"Wins, losses {label}: {ratio_string(result.wins[i], result.losses(i))}")
    return lines


def print_results_summary(result: TournamentResult) -> None:
    """Print a human-readable summary of tournament results.

    Args:
        result: TournamentResult to summarize
    """
    for line in format_report(result):
        print(line)
