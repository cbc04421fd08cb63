"""Dice primitives and the randomness source for Grapple.

Every random decision in the engine is built from a single primitive: rolling
one die of N sides. A dice pair is two six-sided rolls taken in call order.

The randomness source is a ``DiceRoller`` that owns its own ``random.Random``.
Resolvers take an optional ``roller`` argument; when it is omitted they use the
process-wide default roller, which is only looked up at call time. The default
is replaced wholesale by ``set_seed`` and ``reset_random`` and is never mutated
in place.

Independent simulation runs (threads, processes, sweeps) should each create
their own ``DiceRoller`` instead of sharing the default.

Usage:
    from grapple.dice import DiceRoller, roll_pair, set_seed

    set_seed(42)
    pair = roll_pair()

    roller = DiceRoller(seed=7)
    pair = roll_pair(roller)
"""

from __future__ import annotations

import logging
import os
import random
from collections.abc import Iterable, Iterator

from grapple.parameters import BOXCARS_FACE, DIE_SIDES, SNAKE_EYES_FACE

logger = logging.getLogger(__name__)

DicePair = tuple[int, int]

SEED_ENV_VAR = "GRAPPLE_SEED"


class DiceRoller:
    """A source of die rolls.

    Attributes:
        seed: The seed this roller was created with (None for true random)
    """

    def __init__(self, seed: int | str | None = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def roll(self, sides: int) -> int:
        """Roll one die. Returns an integer in [1, sides]."""
        return self._random.randint(1, sides)

    @classmethod
    def from_faces(cls, faces: Iterable[int]) -> ScriptedRoller:
        """Create a roller that returns the given faces in order."""
        return ScriptedRoller(faces)

    def __repr__(self) -> str:
        return f"DiceRoller(seed={self.seed!r})"


class ScriptedRoller(DiceRoller):
    """A roller that replays a fixed sequence of die faces.

    Used to force specific dice in tests and scenario walkthroughs. The
    ``sides`` argument of each roll is checked against the scripted face.
    """

    def __init__(self, faces: Iterable[int]) -> None:
        super().__init__(seed=None)
        self._faces: Iterator[int] = iter(list(faces))
        self.consumed = 0

    def roll(self, sides: int) -> int:
        try:
            face = next(self._faces)
        except StopIteration:
            raise RuntimeError(
                f"Scripted roller exhausted after {self.consumed} rolls"
            ) from None
        if not 1 <= face <= sides:
            raise ValueError(f"Scripted face {face} is not a valid d{sides} result")
        self.consumed += 1
        return face

    def __repr__(self) -> str:
        return f"ScriptedRoller(consumed={self.consumed})"


_default_roller = DiceRoller()


def get_default_roller() -> DiceRoller:
    """Return the process-wide roller."""
    return _default_roller


def set_seed(seed: int | str) -> None:
    """Replace the process-wide roller with a seeded one for reproducible runs."""
    global _default_roller
    _default_roller = DiceRoller(seed=seed)
    logger.debug(f"Default roller seeded with {seed!r}")


def reset_random() -> None:
    """Replace the process-wide roller with an unseeded (true random) one."""
    global _default_roller
    _default_roller = DiceRoller()
    logger.debug("Default roller reset to true random")


def seed_from_env() -> int | None:
    """Seed the default roller from GRAPPLE_SEED if it is set.

    Returns:
        The seed that was applied, or None if the variable is unset
    """
    value = os.environ.get(SEED_ENV_VAR)
    if value is None or value == "":
        return None
    seed = int(value)
    set_seed(seed)
    return seed


def _resolve(roller: DiceRoller | None) -> DiceRoller:
    return roller if roller is not None else _default_roller


def roll(sides: int, roller: DiceRoller | None = None) -> int:
    """Roll a die with any number of sides.

    Consumes exactly one draw from the roller. ``sides`` must be >= 1.

    Args:
        sides: Number of sides on the die
        roller: Source of randomness (default: process-wide roller)

    Returns:
        Result from 1 to sides (inclusive)
    """
    return _resolve(roller).roll(sides)


def roll_pair(roller: DiceRoller | None = None) -> DicePair:
    """Roll two six-sided dice, first die first."""
    source = _resolve(roller)
    first = source.roll(DIE_SIDES)
    second = source.roll(DIE_SIDES)
    return (first, second)


def pair_sum(pair: DicePair) -> int:
    """Sum a dice pair."""
    return pair[0] + pair[1]


def is_snake_eyes(pair: DicePair) -> bool:
    """Both dice show 1 (low critical)."""
    return pair[0] == SNAKE_EYES_FACE and pair[1] == SNAKE_EYES_FACE


def is_boxcars(pair: DicePair) -> bool:
    """Both dice show 6 (high critical)."""
    return pair[0] == BOXCARS_FACE and pair[1] == BOXCARS_FACE


def all_pairs() -> Iterator[DicePair]:
    """Yield all 36 ordered dice pairs, (1, 1) first."""
    for first in range(1, DIE_SIDES + 1):
        for second in range(1, DIE_SIDES + 1):
            yield (first, second)
