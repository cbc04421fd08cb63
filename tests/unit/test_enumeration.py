"""Unit tests for exact enumeration.

The expected counts come from the 2d6 sum distribution
(1, 2, 3, 4, 5, 6, 5, 4, 3, 2, 1 ways for sums 2-12).
"""

import pytest

import grapple.engine.enumeration as enumeration
from grapple.dice import all_pairs
from grapple.engine.enumeration import (
    enumerate_all_results,
    enumerate_battles,
    enumerate_results,
    modifier_tier_distribution,
    pair_sum_distribution,
)
from grapple.models.outcomes import BATTER_LADDER, PITCHER_LADDER, Outcome
from grapple.models.tiers import TIER_ORDER, Tier, TierConfig


class TestPairSumDistribution:
    def test_distribution(self) -> None:
        assert pair_sum_distribution() == {
            2: 1, 3: 2, 4: 3, 5: 4, 6: 5, 7: 6, 8: 5, 9: 4, 10: 3, 11: 2, 12: 1,
        }


class TestEnumerateBattles:
    """Tests for the 1296-combination battle enumeration."""

    def test_zero_modifiers(self) -> None:
        report = enumerate_battles()
        assert report.total_combinations == 1296
        assert report.ties == 146
        assert report.wins_a == report.wins_b == 575

    def test_zero_modifier_tier_counts(self) -> None:
        report = enumerate_battles()
        assert report.tiers_a == {Tier.WEAK: 85, Tier.SOLID: 299, Tier.STRONG: 191}
        assert report.tiers_a == report.tiers_b
        assert report.tier_count(Tier.SOLID) == 598

    def test_partitions_sum_to_total(self) -> None:
        for mod_a, mod_b in [(0, 0), (2, -1), (-3, 3), (5, 0)]:
            report = enumerate_battles(mod_a, mod_b)
            assert report.wins_a + report.wins_b + report.ties == 1296
            tier_total = sum(report.tier_count(t) for t in TIER_ORDER)
            assert tier_total + report.ties == 1296

    def test_modifier_symmetry(self) -> None:
        forward = enumerate_battles(2, -1)
        backward = enumerate_battles(-1, 2)
        assert forward.wins_a == backward.wins_b
        assert forward.ties == backward.ties
        assert forward.tiers_a == backward.tiers_b

    def test_modifier_helps(self) -> None:
        report = enumerate_battles(1, 0)
        assert report.wins_a > report.wins_b

    def test_unreachable_gap_has_no_ties(self) -> None:
        """A +11 modifier lifts every total above the opponent's best roll."""
        report = enumerate_battles(11, 0)
        assert report.wins_a == 1296
        assert report.ties == 0
        assert report.decisive_tier_share(Tier.STRONG) == 100.0

    def test_percentages(self) -> None:
        report = enumerate_battles()
        assert report.tie_pct == pytest.approx(146 / 1296 * 100)
        assert report.win_pct_a == pytest.approx(575 / 1296 * 100)
        assert report.decisive_tier_share(Tier.WEAK) == pytest.approx(170 / 1150 * 100)
        assert report.tier_pct(Tier.WEAK) == pytest.approx(170 / 1296 * 100)

    def test_to_dict(self) -> None:
        data = enumerate_battles().to_dict()
        assert data["ties"] == 146
        assert data["tiers_a"] == {"weak": 85, "solid": 299, "strong": 191}
        assert set(data["tier_pct"]) == {"weak", "solid", "strong"}

    def test_custom_thresholds(self) -> None:
        report = enumerate_battles(tier_config=TierConfig(weak_max=2, solid_max=3))
        assert report.tiers_a[Tier.WEAK] == 0
        assert report.tiers_a[Tier.SOLID] == 2

    def test_short_tally_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pairs = list(all_pairs())[:35]
        monkeypatch.setattr(enumeration, "all_pairs", lambda: iter(pairs))
        with pytest.raises(RuntimeError, match="expected 1296"):
            enumerate_battles()


class TestEnumerateResults:
    """Tests for the 36-combination result enumeration."""

    def test_solid_batter(self) -> None:
        report = enumerate_results(Tier.SOLID, BATTER_LADDER)
        assert report.position_counts == (1, 14, 15, 5, 1)
        assert report.outcome_counts[Outcome.OUT] == 15
        assert report.outcome_counts[Outcome.SINGLE] == 15
        assert report.outcome_counts[Outcome.DOUBLE] == 5
        assert report.outcome_counts[Outcome.HOME_RUN] == 1

    def test_weak_batter(self) -> None:
        report = enumerate_results(Tier.WEAK, BATTER_LADDER)
        assert report.position_counts == (15, 15, 5, 0, 1)
        assert report.outcome_counts[Outcome.OUT] == 30

    def test_strong_pitcher(self) -> None:
        report = enumerate_results(Tier.STRONG, PITCHER_LADDER)
        assert report.position_counts == (1, 0, 14, 15, 6)
        assert report.outcome_counts[Outcome.WALK] == 1
        assert report.outcome_counts[Outcome.DOUBLE_PLAY] == 6

    def test_criticals_counted_once(self) -> None:
        for report in enumerate_all_results(PITCHER_LADDER):
            assert report.snake_eyes == 1
            assert report.boxcars == 1

    def test_every_tier_sums_to_36(self) -> None:
        reports = enumerate_all_results(BATTER_LADDER)
        assert [r.battle_tier for r in reports] == list(TIER_ORDER)
        for report in reports:
            assert sum(report.outcome_counts.values()) == 36
            assert sum(report.position_counts) == 36

    def test_unused_outcomes_are_zero(self) -> None:
        report = enumerate_results(Tier.SOLID, BATTER_LADDER)
        assert report.outcome_counts[Outcome.WALK] == 0
        assert report.outcome_pct(Outcome.WALK) == 0.0

    def test_percentages_over_36(self) -> None:
        report = enumerate_results(Tier.SOLID, BATTER_LADDER)
        assert report.outcome_pct(Outcome.SINGLE) == pytest.approx(15 / 36 * 100)
        assert report.position_pct(0) == pytest.approx(1 / 36 * 100)

    def test_to_dict(self) -> None:
        data = enumerate_results(Tier.SOLID, BATTER_LADDER).to_dict()
        assert data["battle_tier"] == "solid"
        assert data["outcome_counts"]["1b"] == 15
        assert data["position_counts"] == [1, 14, 15, 5, 1]

    def test_short_tally_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pairs = list(all_pairs())[1:]
        monkeypatch.setattr(enumeration, "all_pairs", lambda: iter(pairs))
        with pytest.raises(RuntimeError):
            enumerate_results(Tier.WEAK)


class TestModifierTierDistribution:
    """Tests for how a modifier shifts one roll across tiers."""

    def test_no_modifier(self) -> None:
        dist = modifier_tier_distribution(0)
        assert dist.counts == {Tier.WEAK: 15, Tier.SOLID: 15, Tier.STRONG: 6}

    def test_plus_three(self) -> None:
        dist = modifier_tier_distribution(3)
        assert dist.counts == {Tier.WEAK: 3, Tier.SOLID: 12, Tier.STRONG: 21}
        assert dist.pct(Tier.STRONG) == pytest.approx(21 / 36 * 100)

    def test_each_plus_one_shifts_up(self) -> None:
        strong = [modifier_tier_distribution(m).counts[Tier.STRONG] for m in range(-2, 6)]
        assert strong == sorted(strong)
