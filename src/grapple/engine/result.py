"""Result roll resolution for Grapple.

Resolves the RESULT phase:
1. The battle winner rolls 2d6 for the result
2. Battle tier provides the base offset (0, 1 or 2)
3. Result tier provides an additional offset (0, 1 or 2)
4. Position (0-4) selects the outcome from the winner's ladder

Critical rolls override the formula:
    Snake eyes (2) = position 0 (worst for the ladder's controller)
    Boxcars (12) = position 4 (best for the ladder's controller)

The winner can still hand the loser what they wanted by rolling poorly. Whose
perspective the positions favor is decided entirely by the ladder passed in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from grapple.dice import DicePair, DiceRoller, pair_sum, roll_pair
from grapple.models.outcomes import BATTER_LADDER, Outcome, ResultLadder
from grapple.models.tiers import DEFAULT_TIER_CONFIG, Tier, TierConfig, get_tier, tier_to_offset
from grapple.parameters import MAX_LADDER_POSITION

logger = logging.getLogger(__name__)

SNAKE_EYES_ROLL = 2
BOXCARS_ROLL = 12


class CriticalRoll(str, Enum):
    """Critical result rolls."""

    SNAKE_EYES = "snake-eyes"
    BOXCARS = "boxcars"


@dataclass(frozen=True)
class ResultOutcome:
    """Result of resolving the result phase.

    For critical rolls, result_tier/result_offset are nominal values for
    reporting (WEAK/0 on snake eyes, STRONG/2 on boxcars); the position did
    not come from the offset formula.
    """

    battle_tier: Tier
    result_dice: DicePair
    result_roll: int
    battle_offset: int
    result_tier: Tier
    result_offset: int
    position: int
    outcome: Outcome
    label: str
    critical: CriticalRoll | None


def detect_critical(result_roll: int) -> CriticalRoll | None:
    """Detect a critical result roll from its sum."""
    if result_roll == SNAKE_EYES_ROLL:
        return CriticalRoll.SNAKE_EYES
    if result_roll == BOXCARS_ROLL:
        return CriticalRoll.BOXCARS
    return None


def ladder_position(battle_tier: Tier, result_tier: Tier) -> int:
    """Non-critical ladder position: battle offset + result offset."""
    position = tier_to_offset(battle_tier) + tier_to_offset(result_tier)
    assert 0 <= position <= MAX_LADDER_POSITION, (
        f"Ladder position {position} out of range for {battle_tier.value}+{result_tier.value}"
    )
    return max(0, min(MAX_LADDER_POSITION, position))


def resolve_result(
    battle_tier: Tier,
    dice: DicePair | None = None,
    ladder: ResultLadder = BATTER_LADDER,
    tier_config: TierConfig = DEFAULT_TIER_CONFIG,
    roller: DiceRoller | None = None,
) -> ResultOutcome:
    """Resolve the result phase.

    Args:
        battle_tier: The tier from the battle phase (base offset)
        dice: Explicit result dice; rolled fresh when None
        ladder: Which result ladder to use
        tier_config: Tier thresholds for the result roll
        roller: Source of randomness when dice are rolled

    Returns:
        ResultOutcome with the full trace and the ladder outcome
    """
    result_dice = dice if dice is not None else roll_pair(roller)
    result_roll = pair_sum(result_dice)
    critical = detect_critical(result_roll)
    battle_offset = tier_to_offset(battle_tier)

    if critical is CriticalRoll.SNAKE_EYES:
        result_tier = Tier.WEAK
        position = 0
    elif critical is CriticalRoll.BOXCARS:
        result_tier = Tier.STRONG
        position = MAX_LADDER_POSITION
    else:
        result_tier = get_tier(result_roll, tier_config)
        position = ladder_position(battle_tier, result_tier)

    outcome = ladder.outcome_at(position)
    label = ladder.label_for(outcome)

    if critical is not None:
        logger.debug(f"Result ({ladder.name}): {critical.value}, position forced to {position}")
    logger.debug(
        f"Result ({ladder.name}): {list(result_dice)}={result_roll} -> {result_tier.value}, "
        f"position {position} -> {label}"
    )

    return ResultOutcome(
        battle_tier=battle_tier,
        result_dice=result_dice,
        result_roll=result_roll,
        battle_offset=battle_offset,
        result_tier=result_tier,
        result_offset=tier_to_offset(result_tier),
        position=position,
        outcome=outcome,
        label=label,
        critical=critical,
    )
