"""Exact enumeration of battle and result probabilities.

Instead of sampling, these functions walk the full finite space of dice faces:
- a single dice pair: 6 x 6 = 36 combinations
- a battle (two independent pairs): 36 x 36 = 1296 combinations

and tally exact counts. Percentages always divide by the fixed size of the
space, never by a sample count.

The classification reuses the resolvers' own pure logic so enumeration and
live play cannot drift apart:
- enumerate_battles applies compare_totals (the plain total comparison) and
  counts ties as ties. Live play rerolls ties and applies critical overrides;
  enumeration deliberately reports the pure total-comparison distribution.
- enumerate_results calls resolve_result with explicit dice, so criticals and
  position logic are exactly those of live play.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import asdict, dataclass, field

from grapple.dice import all_pairs, pair_sum
from grapple.engine.battle import Side, compare_totals
from grapple.engine.result import CriticalRoll, resolve_result
from grapple.models.outcomes import BATTER_LADDER, Outcome, ResultLadder
from grapple.models.tiers import DEFAULT_TIER_CONFIG, TIER_ORDER, Tier, TierConfig, get_tier
from grapple.parameters import BATTLE_COMBINATIONS, LADDER_SIZE, PAIR_COMBINATIONS

logger = logging.getLogger(__name__)


def _percent(count: int, total: int) -> float:
    return (count / total) * 100.0


def _check_partition(counted: int, expected: int, what: str) -> None:
    """Fail loudly if a tally does not cover the whole space exactly once."""
    if counted != expected:
        raise RuntimeError(f"{what} tallied {counted} combinations, expected {expected}")


def _empty_tiers() -> dict[Tier, int]:
    return {tier: 0 for tier in TIER_ORDER}


# =============================================================================
# Battle enumeration (1296 combinations)
# =============================================================================


@dataclass(frozen=True)
class BattleEnumeration:
    """Exact battle statistics for a fixed modifier pair.

    Attributes:
        modifier_a: Side A's modifier
        modifier_b: Side B's modifier
        total_combinations: Always 1296
        wins_a: Combinations side A wins
        wins_b: Combinations side B wins
        ties: Combinations with equal totals
        tiers_a: Side A's wins by tier
        tiers_b: Side B's wins by tier
    """

    modifier_a: int
    modifier_b: int
    total_combinations: int
    wins_a: int
    wins_b: int
    ties: int
    tiers_a: dict[Tier, int] = field(default_factory=_empty_tiers)
    tiers_b: dict[Tier, int] = field(default_factory=_empty_tiers)

    @property
    def decisive(self) -> int:
        return self.total_combinations - self.ties

    def tier_count(self, tier: Tier) -> int:
        """Decisive battles won at this tier by either side."""
        return self.tiers_a[tier] + self.tiers_b[tier]

    @property
    def win_pct_a(self) -> float:
        return _percent(self.wins_a, self.total_combinations)

    @property
    def win_pct_b(self) -> float:
        return _percent(self.wins_b, self.total_combinations)

    @property
    def tie_pct(self) -> float:
        return _percent(self.ties, self.total_combinations)

    def tier_pct(self, tier: Tier) -> float:
        """Share of ALL 1296 combinations won at this tier."""
        return _percent(self.tier_count(tier), self.total_combinations)

    def decisive_tier_share(self, tier: Tier) -> float:
        """Share of decisive battles won at this tier (0 if none are decisive)."""
        if self.decisive == 0:
            return 0.0
        return _percent(self.tier_count(tier), self.decisive)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data["tiers_a"] = {tier.value: count for tier, count in self.tiers_a.items()}
        data["tiers_b"] = {tier.value: count for tier, count in self.tiers_b.items()}
        data["win_pct_a"] = self.win_pct_a
        data["win_pct_b"] = self.win_pct_b
        data["tie_pct"] = self.tie_pct
        data["tier_pct"] = {tier.value: self.tier_pct(tier) for tier in TIER_ORDER}
        return data


def enumerate_battles(
    modifier_a: int = 0,
    modifier_b: int = 0,
    tier_config: TierConfig = DEFAULT_TIER_CONFIG,
) -> BattleEnumeration:
    """Enumerate ALL 2d6 vs 2d6 battles (1296 combinations).

    Uses the pure total comparison only: ties are counted, not rerolled, and
    critical overrides are not applied.

    Args:
        modifier_a: Modifier for side A
        modifier_b: Modifier for side B
        tier_config: Tier threshold configuration

    Returns:
        BattleEnumeration with exact counts
    """
    wins: Counter[Side] = Counter()
    ties = 0
    tiers: dict[Side, dict[Tier, int]] = {Side.A: _empty_tiers(), Side.B: _empty_tiers()}

    for dice_a in all_pairs():
        total_a = pair_sum(dice_a) + modifier_a
        for dice_b in all_pairs():
            total_b = pair_sum(dice_b) + modifier_b
            winner, tier = compare_totals(total_a, total_b, tier_config)
            if winner is None:
                ties += 1
                continue
            wins[winner] += 1
            tiers[winner][tier] += 1

    _check_partition(wins[Side.A] + wins[Side.B] + ties, BATTLE_COMBINATIONS, "Battle enumeration")
    _check_partition(
        sum(tiers[Side.A].values()) + sum(tiers[Side.B].values()) + ties,
        BATTLE_COMBINATIONS,
        "Battle tier breakdown",
    )

    logger.debug(
        f"Enumerated battles A{modifier_a:+d} vs B{modifier_b:+d}: "
        f"A={wins[Side.A]} B={wins[Side.B]} ties={ties}"
    )
    return BattleEnumeration(
        modifier_a=modifier_a,
        modifier_b=modifier_b,
        total_combinations=BATTLE_COMBINATIONS,
        wins_a=wins[Side.A],
        wins_b=wins[Side.B],
        ties=ties,
        tiers_a=tiers[Side.A],
        tiers_b=tiers[Side.B],
    )


# =============================================================================
# Result enumeration (36 combinations)
# =============================================================================


@dataclass(frozen=True)
class ResultEnumeration:
    """Exact result-phase statistics for one battle tier and ladder.

    Attributes:
        ladder_name: Name of the ladder enumerated
        battle_tier: Battle tier the result roll builds on
        total_combinations: Always 36
        outcome_counts: Count per outcome (every Outcome present, zero if unused)
        position_counts: Count per ladder position 0-4
        snake_eyes: Critical snake-eyes combinations (always 1)
        boxcars: Critical boxcars combinations (always 1)
    """

    ladder_name: str
    battle_tier: Tier
    total_combinations: int
    outcome_counts: dict[Outcome, int]
    position_counts: tuple[int, ...]
    snake_eyes: int
    boxcars: int

    def outcome_pct(self, outcome: Outcome) -> float:
        return _percent(self.outcome_counts[outcome], self.total_combinations)

    def position_pct(self, position: int) -> float:
        return _percent(self.position_counts[position], self.total_combinations)

    @property
    def outcome_percentages(self) -> dict[Outcome, float]:
        return {outcome: self.outcome_pct(outcome) for outcome in self.outcome_counts}

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "ladder_name": self.ladder_name,
            "battle_tier": self.battle_tier.value,
            "total_combinations": self.total_combinations,
            "outcome_counts": {o.value: c for o, c in self.outcome_counts.items()},
            "outcome_percentages": {o.value: p for o, p in self.outcome_percentages.items()},
            "position_counts": list(self.position_counts),
            "snake_eyes": self.snake_eyes,
            "boxcars": self.boxcars,
        }


def enumerate_results(
    battle_tier: Tier,
    ladder: ResultLadder = BATTER_LADDER,
    tier_config: TierConfig = DEFAULT_TIER_CONFIG,
) -> ResultEnumeration:
    """Enumerate all 36 result rolls for a battle tier, criticals included."""
    outcome_counts: dict[Outcome, int] = {outcome: 0 for outcome in Outcome}
    position_counts = [0] * LADDER_SIZE
    criticals: Counter[CriticalRoll] = Counter()

    for dice in all_pairs():
        result = resolve_result(battle_tier, dice, ladder, tier_config)
        outcome_counts[result.outcome] += 1
        position_counts[result.position] += 1
        if result.critical is not None:
            criticals[result.critical] += 1

    _check_partition(sum(outcome_counts.values()), PAIR_COMBINATIONS, "Result enumeration")
    _check_partition(sum(position_counts), PAIR_COMBINATIONS, "Result position breakdown")

    return ResultEnumeration(
        ladder_name=ladder.name,
        battle_tier=battle_tier,
        total_combinations=PAIR_COMBINATIONS,
        outcome_counts=outcome_counts,
        position_counts=tuple(position_counts),
        snake_eyes=criticals[CriticalRoll.SNAKE_EYES],
        boxcars=criticals[CriticalRoll.BOXCARS],
    )


def enumerate_all_results(
    ladder: ResultLadder = BATTER_LADDER,
    tier_config: TierConfig = DEFAULT_TIER_CONFIG,
) -> list[ResultEnumeration]:
    """Enumerate result rolls for every battle tier (weak, solid, strong)."""
    return [enumerate_results(tier, ladder, tier_config) for tier in TIER_ORDER]


# =============================================================================
# Single-roll distributions (36 combinations)
# =============================================================================


def pair_sum_distribution() -> dict[int, int]:
    """Exact count of each 2d6 sum (2-12) over the 36 combinations."""
    counts: Counter[int] = Counter(pair_sum(dice) for dice in all_pairs())
    return dict(sorted(counts.items()))


@dataclass(frozen=True)
class TierDistribution:
    """Exact tier split of a single 2d6 + modifier roll."""

    modifier: int
    total_combinations: int
    counts: dict[Tier, int]

    def pct(self, tier: Tier) -> float:
        return _percent(self.counts[tier], self.total_combinations)


def modifier_tier_distribution(
    modifier: int,
    tier_config: TierConfig = DEFAULT_TIER_CONFIG,
) -> TierDistribution:
    """How a modifier shifts one 2d6 roll across the tiers.

    Each +1 shifts the bell curve up by one: 2d6+0 peaks at 7, 2d6+3 at 10.
    """
    counts = _empty_tiers()
    for dice in all_pairs():
        counts[get_tier(pair_sum(dice) + modifier, tier_config)] += 1
    _check_partition(sum(counts.values()), PAIR_COMBINATIONS, "Tier distribution")
    return TierDistribution(modifier=modifier, total_combinations=PAIR_COMBINATIONS, counts=counts)
