"""Battle roll resolution for Grapple.

Resolves the BATTLE phase:
1. Both sides roll 2d6 and add their modifier
2. Critical overrides (snake eyes, boxcars) are checked
3. Otherwise the higher total wins
4. The winner's total determines the tier (weak/solid/strong)

Undecided attempts (equal totals, both sides rolling snake eyes) are rerolled
in a bounded loop. The winner's tier selects the base offset on the result
ladder (see grapple.engine.result).

A simpler challenge roll for secondary contests (a runner trying to take an
extra base) lives here as a separate entry point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from grapple.dice import DicePair, DiceRoller, is_boxcars, is_snake_eyes, pair_sum, roll_pair
from grapple.models.tiers import DEFAULT_TIER_CONFIG, Tier, TierConfig, get_tier
from grapple.parameters import MAX_BATTLE_ATTEMPTS, REROLL_WARNING_THRESHOLD

logger = logging.getLogger(__name__)


class Side(str, Enum):
    """A battle participant. By convention A is the batter, B the pitcher."""

    A = "a"
    B = "b"

    @property
    def opponent(self) -> Side:
        return Side.B if self is Side.A else Side.A


class BattleDecision(str, Enum):
    """What settled the battle."""

    SNAKE_EYES = "snake_eyes"  # Loser rolled (1,1); winner gets STRONG
    BOXCARS = "boxcars"  # Winner rolled (6,6); tier from winner's own total
    TOTAL = "total"  # Plain comparison of modified totals


class RerollLimitExceeded(RuntimeError):
    """A battle stayed undecided for the maximum number of attempts."""


@dataclass(frozen=True)
class BattleOutcome:
    """Result of a battle roll.

    Attributes:
        dice_a: Side A's raw dice
        dice_b: Side B's raw dice
        modifier_a: Side A's modifier
        modifier_b: Side B's modifier
        total_a: dice sum + modifier for side A
        total_b: dice sum + modifier for side B
        winner: Winning side (None only for a tie)
        tier: Winner's tier (None only for a tie)
        decided_by: What settled the battle (None only for a tie)
        snake_eyes_a: Side A rolled (1,1)
        snake_eyes_b: Side B rolled (1,1)
        boxcars_a: Side A rolled (6,6)
        boxcars_b: Side B rolled (6,6)
        attempts: Dice rolls taken to reach this result (1 = no reroll)
    """

    dice_a: DicePair
    dice_b: DicePair
    modifier_a: int
    modifier_b: int
    total_a: int
    total_b: int
    winner: Side | None
    tier: Tier | None
    decided_by: BattleDecision | None
    snake_eyes_a: bool
    snake_eyes_b: bool
    boxcars_a: bool
    boxcars_b: bool
    attempts: int = 1

    def __post_init__(self) -> None:
        """A tie has neither a tier nor a decision; a win has both."""
        if (self.winner is None) != (self.tier is None):
            raise ValueError(
                f"winner={self.winner} and tier={self.tier} must both be set or both be None"
            )
        if (self.winner is None) != (self.decided_by is None):
            raise ValueError(f"winner={self.winner} and decided_by={self.decided_by} disagree")

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    @property
    def winning_total(self) -> int | None:
        """The winner's modified total (None on a tie)."""
        if self.winner is None:
            return None
        return self.total_a if self.winner is Side.A else self.total_b

    @property
    def margin(self) -> int:
        return abs(self.total_a - self.total_b)


def compare_totals(
    total_a: int, total_b: int, tier_config: TierConfig
) -> tuple[Side | None, Tier | None]:
    """Pure total comparison: strictly higher total wins, tier from its total.

    This is the rule both live play (after criticals) and enumeration use.

    Returns:
        (winner, tier), or (None, None) on equal totals
    """
    if total_a > total_b:
        return Side.A, get_tier(total_a, tier_config)
    if total_b > total_a:
        return Side.B, get_tier(total_b, tier_config)
    return None, None


def decide_battle(
    dice_a: DicePair,
    dice_b: DicePair,
    modifier_a: int,
    modifier_b: int,
    tier_config: TierConfig = DEFAULT_TIER_CONFIG,
) -> BattleOutcome | None:
    """Decide one battle attempt from fixed dice.

    Rules, in order:
    1. Exactly one side rolled snake eyes: that side auto-loses and the
       opponent wins at STRONG regardless of totals. Both: undecided.
    2. Exactly one side rolled boxcars: that side auto-wins with the tier of
       its own total.
    3. Higher total wins with the tier of its total. Equal: undecided.

    Returns:
        BattleOutcome, or None when the attempt must be rerolled
    """
    total_a = pair_sum(dice_a) + modifier_a
    total_b = pair_sum(dice_b) + modifier_b
    snake_a, snake_b = is_snake_eyes(dice_a), is_snake_eyes(dice_b)
    boxcars_a, boxcars_b = is_boxcars(dice_a), is_boxcars(dice_b)

    winner: Side | None
    tier: Tier | None
    if snake_a and snake_b:
        return None
    if snake_a or snake_b:
        winner = Side.B if snake_a else Side.A
        tier = Tier.STRONG
        decided_by = BattleDecision.SNAKE_EYES
    elif boxcars_a != boxcars_b:
        winner = Side.A if boxcars_a else Side.B
        tier = get_tier(total_a if boxcars_a else total_b, tier_config)
        decided_by = BattleDecision.BOXCARS
    else:
        winner, tier = compare_totals(total_a, total_b, tier_config)
        if winner is None:
            return None
        decided_by = BattleDecision.TOTAL

    return BattleOutcome(
        dice_a=dice_a,
        dice_b=dice_b,
        modifier_a=modifier_a,
        modifier_b=modifier_b,
        total_a=total_a,
        total_b=total_b,
        winner=winner,
        tier=tier,
        decided_by=decided_by,
        snake_eyes_a=snake_a,
        snake_eyes_b=snake_b,
        boxcars_a=boxcars_a,
        boxcars_b=boxcars_b,
    )


def roll_battle(
    modifier_a: int,
    modifier_b: int,
    tier_config: TierConfig = DEFAULT_TIER_CONFIG,
    roller: DiceRoller | None = None,
    max_attempts: int = MAX_BATTLE_ATTEMPTS,
) -> BattleOutcome:
    """Roll a battle between two sides until it is decided.

    Each attempt rolls side A's pair, then side B's pair.

    Args:
        modifier_a: Side A's modifier from the commit phase
        modifier_b: Side B's modifier from the commit phase
        tier_config: Tier threshold configuration
        roller: Source of randomness (default: process-wide roller)
        max_attempts: Attempts allowed before giving up

    Returns:
        A decisive BattleOutcome (winner and tier always set)

    Raises:
        RerollLimitExceeded: If no attempt was decisive within max_attempts
    """
    for attempt in range(1, max_attempts + 1):
        dice_a = roll_pair(roller)
        dice_b = roll_pair(roller)
        outcome = decide_battle(dice_a, dice_b, modifier_a, modifier_b, tier_config)
        if outcome is not None:
            logger.debug(
                f"Battle: A {list(dice_a)}{modifier_a:+d}={outcome.total_a} vs "
                f"B {list(dice_b)}{modifier_b:+d}={outcome.total_b} -> "
                f"{outcome.winner.value.upper()} {outcome.tier.value} "
                f"({outcome.decided_by.value}, attempt {attempt})"
            )
            return replace(outcome, attempts=attempt)

        logger.debug(
            f"Battle attempt {attempt} undecided: A {list(dice_a)} vs B {list(dice_b)}, rerolling"
        )
        if attempt == REROLL_WARNING_THRESHOLD:
            logger.warning(
                f"Battle still undecided after {attempt} attempts "
                f"(modifiers A{modifier_a:+d} B{modifier_b:+d}); check the configuration"
            )

    raise RerollLimitExceeded(
        f"Battle undecided after {max_attempts} attempts "
        f"(modifiers A{modifier_a:+d} B{modifier_b:+d})"
    )


# =============================================================================
# Challenge roll (secondary contests)
# =============================================================================


@dataclass(frozen=True)
class ChallengeOutcome:
    """Result of a challenge roll between a defender and a runner."""

    defender_dice: DicePair
    runner_dice: DicePair
    defender_total: int
    runner_total: int
    defender_wins: bool

    @property
    def runner_wins(self) -> bool:
        return not self.defender_wins


def decide_challenge(
    defender_dice: DicePair, runner_dice: DicePair, defender_modifier: int = 0
) -> bool:
    """Decide a challenge from fixed dice. Returns True if the defender wins.

    Snake eyes are an automatic failure and boxcars an automatic success,
    defender checked first. Otherwise ties go to the runner.
    """
    if is_snake_eyes(defender_dice):
        return False
    if is_snake_eyes(runner_dice):
        return True
    if is_boxcars(defender_dice):
        return True
    if is_boxcars(runner_dice):
        return False
    return pair_sum(defender_dice) + defender_modifier > pair_sum(runner_dice)


def challenge_roll(
    defender_modifier: int = 0, roller: DiceRoller | None = None
) -> ChallengeOutcome:
    """Roll a single-pass challenge (stretch, advancement, double play).

    The defender pair is rolled first, then the runner pair. There is no
    reroll and no tier.
    """
    defender_dice = roll_pair(roller)
    runner_dice = roll_pair(roller)
    defender_wins = decide_challenge(defender_dice, runner_dice, defender_modifier)
    logger.debug(
        f"Challenge: defender {list(defender_dice)}{defender_modifier:+d} vs runner "
        f"{list(runner_dice)} -> {'defender' if defender_wins else 'runner'}"
    )
    return ChallengeOutcome(
        defender_dice=defender_dice,
        runner_dice=runner_dice,
        defender_total=pair_sum(defender_dice) + defender_modifier,
        runner_total=pair_sum(runner_dice),
        defender_wins=defender_wins,
    )
