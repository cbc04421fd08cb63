"""Commit phase: turn both matchups into per-side dice modifiers.

Flow:
1. Both players commit to a strategy and a stance
2. Strategy result -> win/lose/tie modifier for each side
3. Stance result (player A reads, player B acts) -> winner/loser/miss modifier
4. Each side's total modifier is the sum of its two contributions
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from grapple.engine.matchup import (
    MatchupResult,
    StanceResult,
    explain_stance,
    explain_strategy,
)
from grapple.models.choices import StanceSet, StrategySet
from grapple.models.rewards import ModifierConfig, StanceRewards, StrategyRewards

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerCommitment:
    """A player's complete commitment (strategy + stance)."""

    strategy: str
    stance: str


@dataclass(frozen=True)
class LayerResolution:
    """One matchup layer resolved into modifiers.

    Attributes:
        result: The layer's raw result (MatchupResult or StanceResult)
        explanation: Human-readable justification
        modifier_a: Contribution to player A's modifier
        modifier_b: Contribution to player B's modifier
    """

    result: MatchupResult | StanceResult
    explanation: str
    modifier_a: int
    modifier_b: int


@dataclass(frozen=True)
class CommitResult:
    """Result of the commit/reveal phase."""

    player_a: PlayerCommitment
    player_b: PlayerCommitment
    strategy: LayerResolution
    stance: LayerResolution

    @property
    def total_modifier_a(self) -> int:
        return self.strategy.modifier_a + self.stance.modifier_a

    @property
    def total_modifier_b(self) -> int:
        return self.strategy.modifier_b + self.stance.modifier_b


def strategy_modifiers(result: MatchupResult, rewards: StrategyRewards) -> tuple[int, int]:
    """Modifiers (a, b) for a strategy result seen from player A."""
    if result is MatchupResult.WIN:
        return rewards.win, rewards.lose
    if result is MatchupResult.LOSE:
        return rewards.lose, rewards.win
    return rewards.tie, rewards.tie


def stance_modifiers(result: StanceResult, rewards: StanceRewards) -> tuple[int, int]:
    """Modifiers (reader, actor) for a stance result."""
    if result is StanceResult.READER:
        return rewards.winner, rewards.loser
    if result is StanceResult.ACTOR:
        return rewards.loser, rewards.winner
    return rewards.miss, rewards.miss


def resolve_commit(
    player_a: PlayerCommitment,
    player_b: PlayerCommitment,
    strategy_set: StrategySet,
    stance_set: StanceSet,
    modifiers: ModifierConfig,
) -> CommitResult:
    """Resolve the commit phase for two players.

    Args:
        player_a: First player's commitment (stance reader)
        player_b: Second player's commitment (stance actor)
        strategy_set: Strategy rules to use
        stance_set: Stance rules to use
        modifiers: Reward values for each outcome

    Returns:
        CommitResult with per-layer resolutions and combined modifiers
    """
    logger.debug(
        f"Commit: A={player_a.strategy}/{player_a.stance} B={player_b.strategy}/{player_b.stance}"
    )

    strategy_result, strategy_text = explain_strategy(
        player_a.strategy, player_b.strategy, strategy_set
    )
    strat_a, strat_b = strategy_modifiers(strategy_result, modifiers.strategy)
    logger.debug(
        f"Strategy: {strategy_result.value} ({strategy_text}) -> A{strat_a:+d} B{strat_b:+d}"
    )

    stance_result, stance_text = explain_stance(player_a.stance, player_b.stance, stance_set)
    stance_a, stance_b = stance_modifiers(stance_result, modifiers.stance)
    logger.debug(f"Stance: {stance_result.value} ({stance_text}) -> A{stance_a:+d} B{stance_b:+d}")

    result = CommitResult(
        player_a=player_a,
        player_b=player_b,
        strategy=LayerResolution(strategy_result, strategy_text, strat_a, strat_b),
        stance=LayerResolution(stance_result, stance_text, stance_a, stance_b),
    )
    logger.debug(
        f"Combined modifiers: A{result.total_modifier_a:+d} B{result.total_modifier_b:+d}"
    )
    return result
