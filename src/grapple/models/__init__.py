"""Grapple configuration and value models.

This module exports the data structures that describe a game mode: tier
thresholds, choice sets, reward tables and result ladders.
"""

from .choices import (
    BASEBALL_STANCE_SET,
    BASEBALL_STRATEGY_SET,
    COIN_STANCE_SET,
    DEFAULT_STRATEGY_SET,
    Axis,
    StanceExplanations,
    StanceSet,
    StrategySet,
)
from .outcomes import (
    BATTER_LADDER,
    BATTER_R3_PRESSURE_LADDER,
    OUTCOME_LABELS,
    PITCHER_2WALK_LADDER,
    PITCHER_3WALK_LADDER,
    PITCHER_LADDER,
    SHIPPED_LADDERS,
    Outcome,
    ResultLadder,
)
from .rewards import (
    DEFAULT_MODIFIER_CONFIG,
    ModifierConfig,
    StanceRewards,
    StrategyRewards,
)
from .tiers import (
    DEFAULT_TIER_CONFIG,
    TIER_ORDER,
    Tier,
    TierConfig,
    get_tier,
    tier_to_offset,
)

__all__ = [
    # Tiers
    "Tier",
    "TierConfig",
    "TIER_ORDER",
    "DEFAULT_TIER_CONFIG",
    "get_tier",
    "tier_to_offset",
    # Choice sets
    "Axis",
    "StanceExplanations",
    "StanceSet",
    "StrategySet",
    "DEFAULT_STRATEGY_SET",
    "BASEBALL_STRATEGY_SET",
    "BASEBALL_STANCE_SET",
    "COIN_STANCE_SET",
    # Rewards
    "ModifierConfig",
    "StrategyRewards",
    "StanceRewards",
    "DEFAULT_MODIFIER_CONFIG",
    # Outcomes and ladders
    "Outcome",
    "OUTCOME_LABELS",
    "ResultLadder",
    "BATTER_LADDER",
    "BATTER_R3_PRESSURE_LADDER",
    "PITCHER_LADDER",
    "PITCHER_2WALK_LADDER",
    "PITCHER_3WALK_LADDER",
    "SHIPPED_LADDERS",
]
