"""Round-robin tournament for pigsim.

Key pieces:
- round_robin: Runs every pairing across a process pool and sums win counts
- run_series: Worker function playing one strategy's higher-indexed pairings
- TournamentResult: Validated aggregate result
- ratio_string / format_report / print_results_summary: Text reporting

Usage:
    from pigsim.tournament import round_robin, print_results_summary

    result = round_robin(strategies, games_per_series=10)
    print_results_summary(result)
"""

from .report import (
    format_report,
    print_results_summary,
    ratio_string,
)
from .round_robin import (
    TournamentResult,
    round_robin,
    run_series,
)

__all__ = [
    "TournamentResult",
    "round_robin",
    "run_series",
    "format_report",
    "print_results_summary",
    "ratio_string",
]
