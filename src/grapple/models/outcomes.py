"""Outcome labels and result ladders.

A result ladder is an ordered 5-slot table of outcomes indexed by position
(0-4). Position 0 is the worst slot for the ladder's controller and position
4 the best. Two ladders exist per contest, one controlled by each side, so one
ladder's worst slot is the other's best.

Outcome categories (hit / walk / out) are properties on the Outcome enum so
that consumers such as the baserunning layer can match on them exhaustively.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from grapple.parameters import LADDER_SIZE


class Outcome(str, Enum):
    """All final at-bat outcomes.

    Inherits from str for proper JSON serialization.
    """

    # Batter outcomes
    OUT = "out"  # Generic out
    SINGLE = "1b"
    DOUBLE = "2b"
    HOME_RUN = "hr"

    # Pitcher outcomes
    WALK = "bb"  # Base on balls
    OUT_RUNNERS_ADVANCE = "o-ra"
    OUT_RUNNER_CHALLENGE = "o-rc"  # Runner may attempt to advance
    OUT_RUNNERS_FREEZE = "o-rf"
    DOUBLE_PLAY = "dp"
    STRIKEOUT = "k"

    @property
    def is_hit(self) -> bool:
        return self in _HITS

    @property
    def is_walk(self) -> bool:
        return self is Outcome.WALK

    @property
    def is_out(self) -> bool:
        return self in _OUTS

    @property
    def outs_recorded(self) -> int:
        """Outs the outcome records before baserunning is considered.

        A double play records two outs only when a runner is on base; that
        adjustment belongs to the baserunning layer.
        """
        if self is Outcome.DOUBLE_PLAY:
            return 2
        return 1 if self.is_out else 0


_HITS = frozenset({Outcome.SINGLE, Outcome.DOUBLE, Outcome.HOME_RUN})
_OUTS = frozenset(
    {
        Outcome.OUT,
        Outcome.OUT_RUNNERS_ADVANCE,
        Outcome.OUT_RUNNER_CHALLENGE,
        Outcome.OUT_RUNNERS_FREEZE,
        Outcome.DOUBLE_PLAY,
        Outcome.STRIKEOUT,
    }
)

OUTCOME_LABELS: dict[Outcome, str] = {
    Outcome.OUT: "Out",
    Outcome.SINGLE: "Single",
    Outcome.DOUBLE: "Double",
    Outcome.HOME_RUN: "Home Run",
    Outcome.WALK: "Walk",
    Outcome.OUT_RUNNERS_ADVANCE: "Out (Runners Advance)",
    Outcome.OUT_RUNNER_CHALLENGE: "Out (Runner Challenge)",
    Outcome.OUT_RUNNERS_FREEZE: "Out (Runners Freeze)",
    Outcome.DOUBLE_PLAY: "Double Play",
    Outcome.STRIKEOUT: "Strikeout",
}


class ResultLadder(BaseModel):
    """A 5-position outcome ladder.

    Attributes:
        name: Display name of the ladder
        controller: Which side the ladder favors at position 4 (display only)
        outcomes: Exactly five outcomes, positions 0 (worst) to 4 (best)
        labels: Human-readable label for each outcome on the ladder
    """

    model_config = ConfigDict(frozen=True)

    name: str
    controller: Literal["batter", "pitcher"]
    outcomes: tuple[Outcome, Outcome, Outcome, Outcome, Outcome]
    labels: dict[Outcome, str] = Field(default_factory=lambda: dict(OUTCOME_LABELS))

    @field_validator("outcomes", mode="before")
    @classmethod
    def validate_length(cls, v: object) -> object:
        if isinstance(v, (list, tuple)) and len(v) != LADDER_SIZE:
            raise ValueError(f"A ladder needs exactly {LADDER_SIZE} outcomes, got {len(v)}")
        return v

    @model_validator(mode="after")
    def validate_labels(self) -> "ResultLadder":
        missing = [o.value for o in self.outcomes if o not in self.labels]
        if missing:
            raise ValueError(f"Ladder {self.name!r} has no label for {missing}")
        return self

    def outcome_at(self, position: int) -> Outcome:
        """Outcome at a ladder position (0-4)."""
        return self.outcomes[position]

    def label_for(self, outcome: Outcome) -> str:
        """Human-readable label for an outcome on this ladder."""
        return self.labels[outcome]

    def distinct_outcomes(self) -> list[Outcome]:
        """Outcomes on the ladder in first-appearance order."""
        return list(dict.fromkeys(self.outcomes))


# =============================================================================
# Shipped ladders
# =============================================================================

# Position 0: worst for batter (gave pitcher what they wanted)
# Position 4: best for batter
BATTER_LADDER = ResultLadder(
    name="Batter Controls",
    controller="batter",
    outcomes=(Outcome.OUT, Outcome.OUT, Outcome.SINGLE, Outcome.DOUBLE, Outcome.HOME_RUN),
)

# Runner on third: the pitcher is pressured and the second slot becomes a walk.
BATTER_R3_PRESSURE_LADDER = ResultLadder(
    name="Batter Controls (R3 Pressure)",
    controller="batter",
    outcomes=(Outcome.OUT, Outcome.WALK, Outcome.SINGLE, Outcome.DOUBLE, Outcome.HOME_RUN),
)

# Position 0: worst for pitcher (walk)
# Position 4: best for pitcher (double play)
PITCHER_LADDER = ResultLadder(
    name="Pitcher Controls",
    controller="pitcher",
    outcomes=(
        Outcome.WALK,
        Outcome.OUT_RUNNERS_ADVANCE,
        Outcome.OUT_RUNNER_CHALLENGE,
        Outcome.OUT_RUNNERS_FREEZE,
        Outcome.DOUBLE_PLAY,
    ),
)

PITCHER_2WALK_LADDER = ResultLadder(
    name="Pitcher Controls (2 Walk)",
    controller="pitcher",
    outcomes=(
        Outcome.WALK,
        Outcome.WALK,
        Outcome.OUT_RUNNER_CHALLENGE,
        Outcome.OUT_RUNNERS_FREEZE,
        Outcome.DOUBLE_PLAY,
    ),
)

# Mirrors the batter's three out boxes; for testing extremes.
PITCHER_3WALK_LADDER = ResultLadder(
    name="Pitcher Controls (3 Walk)",
    controller="pitcher",
    outcomes=(
        Outcome.WALK,
        Outcome.WALK,
        Outcome.WALK,
        Outcome.OUT_RUNNERS_FREEZE,
        Outcome.DOUBLE_PLAY,
    ),
)

SHIPPED_LADDERS: dict[str, ResultLadder] = {
    "batter": BATTER_LADDER,
    "batter-r3": BATTER_R3_PRESSURE_LADDER,
    "pitcher": PITCHER_LADDER,
    "pitcher-2walk": PITCHER_2WALK_LADDER,
    "pitcher-3walk": PITCHER_3WALK_LADDER,
}
