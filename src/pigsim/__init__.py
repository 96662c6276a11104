"""pigsim: compare strategies for the dice game Pig by simulation.

The engine plays many independent games between every pair of strategies in
a round robin and reports win/loss ratios per strategy.
"""

__version__ = "0.1.0"
