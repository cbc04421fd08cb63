"""Base opponent interface for Grapple.

An opponent commits to a strategy and a stance for each contest. Every
opponent draws its randomness from a ``DiceRoller`` so seeding applies to CPU
choices exactly as it does to dice.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Literal

from grapple.dice import DiceRoller, roll
from grapple.engine.commit import PlayerCommitment
from grapple.models.choices import StanceSet, StrategySet


def random_choice(options: Sequence[str], roller: DiceRoller | None = None) -> str:
    """Pick one option uniformly using a single die of len(options) sides.

    Raises:
        ValueError: If there are no options to choose from
    """
    if not options:
        raise ValueError("Cannot choose from an empty set of options")
    return options[roll(len(options), roller) - 1]


class Opponent(ABC):
    """Abstract base class for all opponent types.

    Subclasses:
        - RandomOpponent (uniform strategy and stance)
        - LineupBatter (strategy from batting order, random stance)
    """

    def __init__(self, name: str = "CPU", roller: DiceRoller | None = None):
        """Initialize opponent.

        Args:
            name: Display name for the opponent
            roller: Source of randomness (default: process-wide roller)
        """
        self.name = name
        self.roller = roller
        self._history: list[PlayerCommitment] = []

    @abstractmethod
    def choose_strategy(self, strategy_set: StrategySet) -> str:
        """Choose a strategy from the set."""

    def choose_stance(self, stance_set: StanceSet) -> str:
        """Choose a stance; uniform over every axis choice by default."""
        return random_choice(stance_set.choices, self.roller)

    def choose_commitment(
        self, strategy_set: StrategySet, stance_set: StanceSet
    ) -> PlayerCommitment:
        """Choose strategy then stance, and remember the commitment."""
        commitment = PlayerCommitment(
            strategy=self.choose_strategy(strategy_set),
            stance=self.choose_stance(stance_set),
        )
        self._history.append(commitment)
        return commitment

    @property
    def history(self) -> list[PlayerCommitment]:
        return list(self._history)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


OpponentType = Literal["random", "lineup"]


def list_opponent_types() -> list[str]:
    """Available opponent type names."""
    return ["random", "lineup"]


def get_opponent_by_type(
    opponent_type: OpponentType,
    roller: DiceRoller | None = None,
    **kwargs,
) -> Opponent:
    """Create an opponent by type name.

    Args:
        opponent_type: One of list_opponent_types()
        roller: Source of randomness for the opponent
        **kwargs: Extra arguments for the opponent class (e.g. lineup_position)

    Raises:
        ValueError: If the type is unknown
    """
    from grapple.opponents.cpu import LineupBatter, RandomOpponent

    if opponent_type == "random":
        return RandomOpponent(roller=roller, **kwargs)
    if opponent_type == "lineup":
        return LineupBatter(roller=roller, **kwargs)
    raise ValueError(f"Unknown opponent type: {opponent_type}")
