"""Tests for pigsim.strategies.

Tests cover:
- Strategy abstract base class
- StayAtK threshold policy
- RandomStrategy coin-flip policy
- get_strategy_by_type() factory and default_strategies()
"""

import pickle

import pytest

from pigsim.models.actions import ActionKind
from pigsim.models.score import Score
from pigsim.strategies import (
    RandomStrategy,
    StayAtK,
    Strategy,
    default_strategies,
    get_strategy_by_type,
    list_strategy_types,
)


class TestStrategyBase:
    """Tests for the Strategy interface."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Strategy()

    def test_custom_strategy_plugs_in(self, rng):
        """New strategies only need choose_action and label."""

        class AlwaysStay(Strategy):
            def choose_action(self, score, rng):
                return ActionKind.STAY

            def label(self):
                return "Always stay"

        strategy = AlwaysStay()
        assert strategy.choose_action(Score(), rng) == ActionKind.STAY
        assert str(strategy) == "Always stay"


class TestStayAtK:
    """Tests for the threshold strategy."""

    def test_exposes_k(self):
        assert StayAtK(20).k == 20

    def test_k_is_read_only(self):
        strategy = StayAtK(20)
        with pytest.raises(AttributeError):
            strategy.k = 5

    @pytest.mark.parametrize("k", [0, -3])
    def test_rejects_non_positive_k(self, k):
        with pytest.raises(ValueError):
            StayAtK(k)

    def test_rolls_below_threshold(self, rng):
        assert StayAtK(20).choose_action(Score(0, 0, 19), rng) == ActionKind.ROLL

    def test_stays_at_threshold(self, rng):
        assert StayAtK(20).choose_action(Score(0, 0, 20), rng) == ActionKind.STAY

    def test_stays_above_threshold(self, rng):
        assert StayAtK(20).choose_action(Score(0, 0, 25), rng) == ActionKind.STAY

    def test_stay_at_100_never_stays_early(self, rng):
        """StayAtK(100) rolls for every this_turn below 100, whatever the banked scores."""
        strategy = StayAtK(100)
        for this_turn in range(100):
            for player, opponent in [(0, 0), (50, 90), (99, 0)]:
                score = Score(player, opponent, this_turn)
                assert strategy.choose_action(score, rng) == ActionKind.ROLL

    def test_does_not_use_rng(self, scripted_rng):
        rng = scripted_rng([3])
        StayAtK(5).choose_action(Score(0, 0, 2), rng)
        assert rng.random_calls == 0
        assert rng.randint_calls == 0

    def test_label(self):
        assert StayAtK(7).label() == "Stay at 7"
        assert str(StayAtK(7)) == "Stay at 7"

    def test_equality_and_hash(self):
        assert StayAtK(3) == StayAtK(3)
        assert StayAtK(3) != StayAtK(4)
        assert len({StayAtK(3), StayAtK(3), StayAtK(4)}) == 2

    def test_picklable(self):
        assert pickle.loads(pickle.dumps(StayAtK(42))) == StayAtK(42)


class TestRandomStrategy:
    """Tests for the coin-flip strategy."""

    def test_label(self):
        assert RandomStrategy().label() == "Random!"

    def test_stays_when_draw_above_half(self, scripted_rng):
        assert RandomStrategy().choose_action(Score(), scripted_rng([2], draw=0.75)) == ActionKind.STAY

    def test_rolls_when_draw_below_half(self, scripted_rng):
        assert RandomStrategy().choose_action(Score(), scripted_rng([2], draw=0.25)) == ActionKind.ROLL

    def test_exact_half_rolls(self, scripted_rng):
        assert RandomStrategy().choose_action(Score(), scripted_rng([2], draw=0.5)) == ActionKind.ROLL

    def test_roughly_even_split(self, rng):
        strategy = RandomStrategy()
        stays = sum(
            1 for _ in range(10000)
            if strategy.choose_action(Score(10, 10, 10), rng) == ActionKind.STAY
        )
        assert 4700 < stays < 5300

    def test_one_draw_per_decision(self, scripted_rng):
        rng = scripted_rng([2], draw=0.9)
        strategy = RandomStrategy()
        for _ in range(5):
            strategy.choose_action(Score(), rng)
        assert rng.random_calls == 5

    def test_equality_and_pickle(self):
        assert RandomStrategy() == RandomStrategy()
        assert RandomStrategy() != StayAtK(1)
        assert pickle.loads(pickle.dumps(RandomStrategy())) == RandomStrategy()


class TestFactory:
    """Tests for get_strategy_by_type and default_strategies."""

    @pytest.mark.parametrize("name", ["stay_at_20", "stay-at-20", "Stay at 20", "STAY_AT_20", "stayat20"])
    def test_stay_at_names(self, name):
        assert get_strategy_by_type(name) == StayAtK(20)

    @pytest.mark.parametrize("name", ["random", "Random!", " RANDOM "])
    def test_random_names(self, name):
        assert get_strategy_by_type(name) == RandomStrategy()

    @pytest.mark.parametrize("name", ["", "stay_at", "stay_at_x", "greedy"])
    def test_unknown_names_raise(self, name):
        with pytest.raises(ValueError, match="Unknown strategy type"):
            get_strategy_by_type(name)

    def test_stay_at_zero_raises(self):
        with pytest.raises(ValueError):
            get_strategy_by_type("stay_at_0")

    def test_list_strategy_types(self):
        assert "random" in list_strategy_types()

    def test_default_strategies_reference_lineup(self):
        strategies = default_strategies()
        assert len(strategies) == 101
        assert strategies[0] == StayAtK(1)
        assert strategies[99] == StayAtK(100)
        assert strategies[-1] == RandomStrategy()

    def test_default_strategies_custom_win(self):
        strategies = default_strategies(win=5)
        assert [s.label() for s in strategies] == [
            "Stay at 1",
            "Stay at 2",
            "Stay at 3",
            "Stay at 4",
            "Stay at 5",
            "Random!",
        ]
