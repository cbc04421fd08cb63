"""Opponent implementations for Grapple.

All opponents implement the Opponent base class interface and draw their
choices from a DiceRoller, so seeded runs reproduce CPU commitments too.
"""

from grapple.opponents.base import (
    Opponent,
    OpponentType,
    get_opponent_by_type,
    list_opponent_types,
    random_choice,
)
from grapple.opponents.cpu import (
    LINEUP_TENDENCIES,
    LineupBatter,
    RandomOpponent,
    cpu_choose_stance,
    cpu_choose_strategy,
    cpu_commitment,
)

__all__ = [
    # Base classes and types
    "Opponent",
    "OpponentType",
    # Factory functions
    "get_opponent_by_type",
    "list_opponent_types",
    # CPU opponents
    "RandomOpponent",
    "LineupBatter",
    "LINEUP_TENDENCIES",
    # Choice helpers
    "random_choice",
    "cpu_choose_strategy",
    "cpu_choose_stance",
    "cpu_commitment",
]
