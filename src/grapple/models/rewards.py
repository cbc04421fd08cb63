"""Reward tables that turn matchup results into dice modifiers.

Both layers are configuration, not code. Whether the stance loser is
penalized (symmetric) or simply not rewarded (winner-only) is chosen by the
named constructor, never by a branch in the aggregator.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from grapple.parameters import (
    STANCE_MISS_REWARD,
    STANCE_SYMMETRIC_LOSER_REWARD,
    STANCE_WINNER_ONLY_LOSER_REWARD,
    STANCE_WINNER_REWARD,
    STRATEGY_LOSE_REWARD,
    STRATEGY_TIE_REWARD,
    STRATEGY_WIN_REWARD,
)


class StrategyRewards(BaseModel):
    """Modifiers for the strategy matchup (win / lose / tie)."""

    model_config = ConfigDict(frozen=True)

    win: int = Field(default=STRATEGY_WIN_REWARD)
    lose: int = Field(default=STRATEGY_LOSE_REWARD)
    tie: int = Field(default=STRATEGY_TIE_REWARD)


class StanceRewards(BaseModel):
    """Modifiers for the stance matchup.

    Attributes:
        winner: Given to whichever side won the stance (reader on a match,
            actor on a successful deception)
        loser: Given to the side that lost the stance
        miss: Given to both sides when the choices are on different axes
    """

    model_config = ConfigDict(frozen=True)

    winner: int = Field(default=STANCE_WINNER_REWARD)
    loser: int = Field(default=STANCE_SYMMETRIC_LOSER_REWARD)
    miss: int = Field(default=STANCE_MISS_REWARD)


class ModifierConfig(BaseModel):
    """Complete reward configuration for the commit phase."""

    model_config = ConfigDict(frozen=True)

    strategy: StrategyRewards = Field(default_factory=StrategyRewards)
    stance: StanceRewards = Field(default_factory=StanceRewards)

    @classmethod
    def symmetric(
        cls,
        strategy_swing: int = STRATEGY_WIN_REWARD,
        stance_swing: int = STANCE_WINNER_REWARD,
    ) -> ModifierConfig:
        """Winners gain the swing and losers lose it on both layers."""
        return cls(
            strategy=StrategyRewards(
                win=strategy_swing, lose=-strategy_swing, tie=STRATEGY_TIE_REWARD
            ),
            stance=StanceRewards(winner=stance_swing, loser=-stance_swing, miss=STANCE_MISS_REWARD),
        )

    @classmethod
    def winner_only(
        cls,
        strategy_bonus: int = STRATEGY_WIN_REWARD,
        stance_bonus: int = STANCE_WINNER_REWARD,
    ) -> ModifierConfig:
        """Only winners gain a bonus; losers and misses get nothing."""
        return cls(
            strategy=StrategyRewards(win=strategy_bonus, lose=0, tie=STRATEGY_TIE_REWARD),
            stance=StanceRewards(
                winner=stance_bonus,
                loser=STANCE_WINNER_ONLY_LOSER_REWARD,
                miss=STANCE_MISS_REWARD,
            ),
        )

    @classmethod
    def speed_mode(cls) -> ModifierConfig:
        """Strategy is symmetric (+1/-1) while stance rewards the winner only."""
        return cls(
            strategy=StrategyRewards(),
            stance=StanceRewards(
                winner=STANCE_WINNER_REWARD,
                loser=STANCE_WINNER_ONLY_LOSER_REWARD,
                miss=STANCE_MISS_REWARD,
            ),
        )

    @classmethod
    def default(cls) -> ModifierConfig:
        """Symmetric +1/-1 on both layers."""
        return cls.symmetric()


DEFAULT_MODIFIER_CONFIG = ModifierConfig.default()
