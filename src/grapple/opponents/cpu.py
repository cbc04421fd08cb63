"""CPU opponents for Grapple.

RandomOpponent commits uniformly at random on both layers. LineupBatter
follows batting-order tendencies for its approach:
- #1-2: balance (get on base, work counts)
- #3-4: power (drive in runs)
- #5-6: balance (situational hitting)
- #7-9: finesse (put the ball in play)
and picks its stance at random.
"""

from __future__ import annotations

import logging

from grapple.dice import DiceRoller
from grapple.engine.commit import PlayerCommitment
from grapple.models.choices import DEFAULT_STRATEGY_SET, StanceSet, StrategySet
from grapple.opponents.base import Opponent, random_choice

logger = logging.getLogger(__name__)

LINEUP_SIZE = 9

# Upper lineup slot (inclusive) -> preferred approach
LINEUP_TENDENCIES: tuple[tuple[int, str], ...] = (
    (2, "balance"),
    (4, "power"),
    (6, "balance"),
    (9, "finesse"),
)


class RandomOpponent(Opponent):
    """Uniform random strategy and stance."""

    def __init__(self, name: str = "Random CPU", roller: DiceRoller | None = None):
        super().__init__(name=name, roller=roller)

    def choose_strategy(self, strategy_set: StrategySet) -> str:
        return random_choice(strategy_set.choices, self.roller)


class LineupBatter(Opponent):
    """Batter whose approach depends on lineup position."""

    def __init__(
        self,
        lineup_position: int = 1,
        name: str | None = None,
        roller: DiceRoller | None = None,
    ):
        if not 1 <= lineup_position <= LINEUP_SIZE:
            raise ValueError(
                f"lineup_position must be 1-{LINEUP_SIZE}, got {lineup_position}"
            )
        super().__init__(name=name or f"Lineup #{lineup_position}", roller=roller)
        self.lineup_position = lineup_position

    @property
    def preferred_strategy(self) -> str:
        for last_slot, approach in LINEUP_TENDENCIES:
            if self.lineup_position <= last_slot:
                return approach
        raise AssertionError(f"No tendency covers lineup position {self.lineup_position}")

    def choose_strategy(self, strategy_set: StrategySet) -> str:
        preferred = self.preferred_strategy
        if preferred in strategy_set.choices:
            return preferred
        # Sets without the baseball approaches get a uniform pick.
        logger.debug(
            f"{self.name}: {preferred!r} not in {strategy_set.name!r}, choosing at random"
        )
        return random_choice(strategy_set.choices, self.roller)


def cpu_choose_strategy(
    strategy_set: StrategySet = DEFAULT_STRATEGY_SET, roller: DiceRoller | None = None
) -> str:
    """Pick a random strategy from the set."""
    return random_choice(strategy_set.choices, roller)


def cpu_choose_stance(stance_set: StanceSet, roller: DiceRoller | None = None) -> str:
    """Pick a random stance from all choices across all axes."""
    return random_choice(stance_set.choices, roller)


def cpu_commitment(
    strategy_set: StrategySet,
    stance_set: StanceSet,
    roller: DiceRoller | None = None,
) -> PlayerCommitment:
    """A complete random commitment: strategy first, then stance."""
    return PlayerCommitment(
        strategy=cpu_choose_strategy(strategy_set, roller),
        stance=cpu_choose_stance(stance_set, roller),
    )
