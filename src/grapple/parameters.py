"""Tunable resolution constants for Grapple.

This module is the SINGLE SOURCE OF TRUTH for the numbers the resolution
engine is balanced around. Structured configurations (tier thresholds, reward
tables, ladders) are built from these values by the named constructors in
``grapple.models``.

Parameter Categories:
- Dice: Shape of the canonical 2d6 roll
- Tiers: Thresholds that turn a roll value into weak/solid/strong
- Rewards: Modifier swings awarded by the strategy and stance layers
- Safety: Guards against pathological configurations

Usage:
    from grapple.parameters import DEFAULT_WEAK_MAX, MAX_BATTLE_ATTEMPTS

Note: Every value here is meant to be tuned against the exact enumeration
reports (see scripts/enumerate_odds.py), not against sampled games.
"""

# =============================================================================
# DICE PARAMETERS
# =============================================================================

DIE_SIDES = 6
"""Faces on every die in a dice pair.

Current: 6

Analysis:
    A pair of six-sided dice gives 36 equally likely ordered combinations and
    a triangular sum distribution peaking at 7. Two independent pairs give
    36 x 36 = 1296 combinations, the full space of one battle roll.
"""

SNAKE_EYES_FACE = 1
"""Face that both dice must show for a low critical (snake eyes)."""

BOXCARS_FACE = 6
"""Face that both dice must show for a high critical (boxcars)."""

PAIR_COMBINATIONS = DIE_SIDES * DIE_SIDES
"""Ordered outcomes of one dice pair (36)."""

BATTLE_COMBINATIONS = PAIR_COMBINATIONS * PAIR_COMBINATIONS
"""Ordered outcomes of two independent dice pairs (1296)."""


# =============================================================================
# TIER PARAMETERS
# =============================================================================

DEFAULT_WEAK_MAX = 6
"""Highest roll value that still counts as a WEAK tier.

Current: 6 (weak = roll <= 6)

Analysis:
    Unmodified 2d6 lands at or below 6 on 15 of 36 combinations (41.7%).
    Tier is set by the winner's roll value, not the margin: a 4 vs 3 is a
    slapfight and the winner only gets a weak tier.

Tuning:
    - If weak results dominate the ladders: decrease toward 5
    - Must stay strictly below DEFAULT_SOLID_MAX
"""

DEFAULT_SOLID_MAX = 9
"""Highest roll value that still counts as a SOLID tier.

Current: 9 (solid = 7-9, strong = 10+)

Analysis:
    Unmodified 2d6 lands on 7-9 on 15 of 36 combinations and on 10+ on 6
    of 36. Each +1 modifier shifts the whole curve up by one, so a +2 side
    reaches strong on 15 of 36 rolls.

Tuning:
    - If home runs / double plays are too rare: decrease toward 8
    - Run: scripts/enumerate_odds.py --curve to see the per-modifier split
"""


# =============================================================================
# REWARD PARAMETERS
# =============================================================================

STRATEGY_WIN_REWARD = 1
"""Modifier for the side that wins the strategy (non-transitive) matchup."""

STRATEGY_LOSE_REWARD = -1
"""Modifier for the side that loses the strategy matchup."""

STRATEGY_TIE_REWARD = 0
"""Modifier for both sides when the strategy choices are equal."""

STANCE_WINNER_REWARD = 1
"""Modifier for the side that wins the stance (read/deceive) matchup."""

STANCE_SYMMETRIC_LOSER_REWARD = -1
"""Modifier for the stance loser when the non-winner is actively penalized.

Related: STANCE_WINNER_ONLY_LOSER_REWARD
"""

STANCE_WINNER_ONLY_LOSER_REWARD = 0
"""Modifier for the stance loser when only the winner is rewarded."""

STANCE_MISS_REWARD = 0
"""Modifier for both sides when stance choices fall on different axes."""


# =============================================================================
# SAFETY PARAMETERS
# =============================================================================

MAX_BATTLE_ATTEMPTS = 1000
"""Upper bound on battle rerolls before the configuration is declared broken.

Current: 1000

Analysis:
    With zero modifiers a single battle attempt is undecided (tie or double
    snake eyes) with probability ~0.11, so 1000 consecutive undecided
    attempts has probability far below 1e-900. Reaching the cap means the
    modifiers make every attempt undecided, which is a misconfiguration.
"""

REROLL_WARNING_THRESHOLD = MAX_BATTLE_ATTEMPTS // 2
"""Attempt count at which a single battle logs a warning about rerolls."""


# =============================================================================
# LADDER PARAMETERS
# =============================================================================

LADDER_SIZE = 5
"""Slots on every result ladder (positions 0-4)."""

MAX_LADDER_POSITION = LADDER_SIZE - 1
"""Best slot for the ladder's controller."""
