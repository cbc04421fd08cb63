"""Full contest pipeline: commit -> battle -> result.

The batter is always side A (stance reader) and the pitcher side B (stance
actor). The battle winner's ladder is chosen here, so the result resolver
never needs to know who controls a ladder.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from grapple.dice import DiceRoller
from grapple.engine.battle import BattleOutcome, Side, roll_battle
from grapple.engine.commit import CommitResult, PlayerCommitment, resolve_commit
from grapple.engine.result import ResultOutcome, resolve_result
from grapple.models.choices import (
    BASEBALL_STANCE_SET,
    BASEBALL_STRATEGY_SET,
    StanceSet,
    StrategySet,
)
from grapple.models.outcomes import BATTER_LADDER, PITCHER_LADDER, Outcome, ResultLadder
from grapple.models.rewards import DEFAULT_MODIFIER_CONFIG, ModifierConfig
from grapple.models.tiers import DEFAULT_TIER_CONFIG, TierConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContestResult:
    """Complete trace of one contest."""

    commit: CommitResult
    battle: BattleOutcome
    result: ResultOutcome

    @property
    def winner(self) -> Side:
        # roll_battle only returns decisive outcomes
        assert self.battle.winner is not None
        return self.battle.winner

    @property
    def outcome(self) -> Outcome:
        return self.result.outcome

    @property
    def batter_won_battle(self) -> bool:
        return self.winner is Side.A


def select_ladder(
    winner: Side,
    batter_ladder: ResultLadder = BATTER_LADDER,
    pitcher_ladder: ResultLadder = PITCHER_LADDER,
) -> ResultLadder:
    """The battle winner's ladder: side A uses the batter's, side B the pitcher's."""
    return batter_ladder if winner is Side.A else pitcher_ladder


def resolve_contest(
    batter: PlayerCommitment,
    pitcher: PlayerCommitment,
    *,
    strategy_set: StrategySet = BASEBALL_STRATEGY_SET,
    stance_set: StanceSet = BASEBALL_STANCE_SET,
    modifiers: ModifierConfig = DEFAULT_MODIFIER_CONFIG,
    tier_config: TierConfig = DEFAULT_TIER_CONFIG,
    batter_ladder: ResultLadder = BATTER_LADDER,
    pitcher_ladder: ResultLadder = PITCHER_LADDER,
    roller: DiceRoller | None = None,
) -> ContestResult:
    """Resolve one contest end to end.

    Dice are consumed in a fixed order from the roller: side A's battle pair,
    side B's battle pair (repeated on each reroll), then the result pair.

    Args:
        batter: Batter's commitment (side A, stance reader)
        pitcher: Pitcher's commitment (side B, stance actor)
        strategy_set: Strategy rules
        stance_set: Stance rules
        modifiers: Reward tables for the commit phase
        tier_config: Tier thresholds for both rolls
        batter_ladder: Ladder used when the batter wins the battle
        pitcher_ladder: Ladder used when the pitcher wins the battle
        roller: Source of randomness (default: process-wide roller)

    Returns:
        ContestResult with the full trace
    """
    commit = resolve_commit(batter, pitcher, strategy_set, stance_set, modifiers)
    battle = roll_battle(
        commit.total_modifier_a,
        commit.total_modifier_b,
        tier_config=tier_config,
        roller=roller,
    )
    assert battle.winner is not None and battle.tier is not None

    ladder = select_ladder(battle.winner, batter_ladder, pitcher_ladder)
    result = resolve_result(battle.tier, ladder=ladder, tier_config=tier_config, roller=roller)

    contest = ContestResult(commit=commit, battle=battle, result=result)
    winner_name = "batter" if contest.batter_won_battle else "pitcher"
    logger.info(
        f"Contest: {winner_name} wins battle ({battle.tier.value}, "
        f"A{commit.total_modifier_a:+d} B{commit.total_modifier_b:+d}) -> "
        f"{ladder.name} position {result.position}: {result.label}"
    )
    return contest
