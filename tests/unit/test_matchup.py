"""Unit tests for the strategy and stance resolvers."""

import itertools

import pytest

from grapple.engine.matchup import (
    MatchupResult,
    StanceResult,
    all_stance_choices,
    explain_stance,
    explain_strategy,
    find_axis,
    resolve_stance,
    resolve_strategy,
)
from grapple.models.choices import (
    BASEBALL_STANCE_SET,
    BASEBALL_STRATEGY_SET,
    COIN_STANCE_SET,
    DEFAULT_STRATEGY_SET,
    StrategySet,
)


# =============================================================================
# Strategy
# =============================================================================


class TestResolveStrategy:
    """Tests for the non-transitive strategy relation."""

    @pytest.mark.parametrize("choice", DEFAULT_STRATEGY_SET.choices)
    def test_same_choice_ties(self, choice: str) -> None:
        assert resolve_strategy(choice, choice, DEFAULT_STRATEGY_SET) is MatchupResult.TIE

    def test_fire_grass_water_cycle(self) -> None:
        assert resolve_strategy("fire", "grass", DEFAULT_STRATEGY_SET) is MatchupResult.WIN
        assert resolve_strategy("grass", "water", DEFAULT_STRATEGY_SET) is MatchupResult.WIN
        assert resolve_strategy("water", "fire", DEFAULT_STRATEGY_SET) is MatchupResult.WIN
        assert resolve_strategy("grass", "fire", DEFAULT_STRATEGY_SET) is MatchupResult.LOSE

    @pytest.mark.parametrize("strategy_set", [DEFAULT_STRATEGY_SET, BASEBALL_STRATEGY_SET])
    def test_antisymmetric_and_total(self, strategy_set: StrategySet) -> None:
        """For every distinct pair exactly one side wins."""
        for a, b in itertools.permutations(strategy_set.choices, 2):
            forward = resolve_strategy(a, b, strategy_set)
            backward = resolve_strategy(b, a, strategy_set)
            assert forward is not MatchupResult.TIE
            assert backward is forward.flipped()

    def test_flipped(self) -> None:
        assert MatchupResult.WIN.flipped() is MatchupResult.LOSE
        assert MatchupResult.LOSE.flipped() is MatchupResult.WIN
        assert MatchupResult.TIE.flipped() is MatchupResult.TIE


class TestExplainStrategy:
    """Tests for strategy justifications."""

    def test_registered_explanation_for_win(self) -> None:
        result, text = explain_strategy("water", "fire", DEFAULT_STRATEGY_SET)
        assert result is MatchupResult.WIN
        assert text == "Water douses fire"

    def test_registered_explanation_for_loss(self) -> None:
        result, text = explain_strategy("power", "finesse", BASEBALL_STRATEGY_SET)
        assert result is MatchupResult.LOSE
        assert text == "Finesse exploits an overcommitted power swing"

    def test_generic_fallback(self) -> None:
        plain = StrategySet(
            choices=("a", "b", "c"),
            beats={"a": ("b",), "b": ("c",), "c": ("a",)},
        )
        assert explain_strategy("a", "b", plain) == (MatchupResult.WIN, "a beats b")
        assert explain_strategy("b", "a", plain) == (MatchupResult.LOSE, "a beats b")

    def test_tie_text(self) -> None:
        result, text = explain_strategy("fire", "fire", DEFAULT_STRATEGY_SET)
        assert result is MatchupResult.TIE
        assert "standoff" in text


# =============================================================================
# Stance
# =============================================================================


class TestResolveStance:
    """Tests for the axis-based stance relation."""

    @pytest.mark.parametrize("choice", BASEBALL_STANCE_SET.choices)
    def test_exact_match_is_reader(self, choice: str) -> None:
        assert resolve_stance(choice, choice, BASEBALL_STANCE_SET) is StanceResult.READER

    def test_same_axis_is_actor(self) -> None:
        assert resolve_stance("up", "down", BASEBALL_STANCE_SET) is StanceResult.ACTOR
        assert resolve_stance("out", "in", BASEBALL_STANCE_SET) is StanceResult.ACTOR

    def test_different_axis_is_miss(self) -> None:
        assert resolve_stance("up", "in", BASEBALL_STANCE_SET) is StanceResult.MISS
        assert resolve_stance("out", "down", BASEBALL_STANCE_SET) is StanceResult.MISS

    def test_exactly_one_actor_partner(self) -> None:
        """Each choice has exactly one opposing choice that fools it."""
        choices = all_stance_choices(BASEBALL_STANCE_SET)
        for reader in choices:
            partners = [
                actor
                for actor in choices
                if resolve_stance(reader, actor, BASEBALL_STANCE_SET) is StanceResult.ACTOR
            ]
            assert len(partners) == 1

    def test_single_axis_never_misses(self) -> None:
        for reader, actor in itertools.product(COIN_STANCE_SET.choices, repeat=2):
            assert resolve_stance(reader, actor, COIN_STANCE_SET) is not StanceResult.MISS

    def test_foreign_choice_raises(self) -> None:
        with pytest.raises(KeyError):
            resolve_stance("sideways", "up", BASEBALL_STANCE_SET)
        with pytest.raises(KeyError):
            resolve_stance("up", "heads", BASEBALL_STANCE_SET)

    def test_foreign_choice_matching_itself_raises(self) -> None:
        with pytest.raises(KeyError):
            resolve_stance("sideways", "sideways", BASEBALL_STANCE_SET)


class TestStanceHelpers:
    """Tests for find_axis and explanations."""

    def test_find_axis(self) -> None:
        assert find_axis("down", BASEBALL_STANCE_SET).name == "vertical"
        assert find_axis("in", BASEBALL_STANCE_SET).name == "horizontal"

    def test_find_axis_foreign(self) -> None:
        with pytest.raises(KeyError):
            find_axis("heads", BASEBALL_STANCE_SET)

    def test_all_stance_choices(self) -> None:
        assert all_stance_choices(BASEBALL_STANCE_SET) == ["up", "down", "in", "out"]

    def test_explanations(self) -> None:
        explanations = BASEBALL_STANCE_SET.explanations
        assert explain_stance("up", "up", BASEBALL_STANCE_SET) == (
            StanceResult.READER,
            explanations.match,
        )
        assert explain_stance("up", "down", BASEBALL_STANCE_SET) == (
            StanceResult.ACTOR,
            explanations.fooled,
        )
        assert explain_stance("up", "out", BASEBALL_STANCE_SET) == (
            StanceResult.MISS,
            explanations.miss,
        )
