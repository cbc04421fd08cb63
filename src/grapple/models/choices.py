"""Choice set definitions for the two pre-roll matchups.

Two structurally similar but semantically distinct relations:

- StrategySet: a non-transitive cycle (rock-paper-scissors). Every pair of
  distinct choices is decided one way, and no choice dominates the rest.
- StanceSet: choices grouped into axes (opposing pairs). The reader wins on an
  exact match, the actor wins on the opposite member of the same axis, and
  different axes are a miss.

The sets are plain data supplied by game modes. Validation happens here, at
construction time; the resolvers in ``grapple.engine.matchup`` trust them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

GENERIC_STRATEGY_WIN = "{a} beats {b}"
GENERIC_STRATEGY_LOSE = "{b} beats {a}"
GENERIC_STRATEGY_TIE = "{a} vs {b} is a standoff"


class StrategySet(BaseModel):
    """A closed set of strategies with a non-transitive "beats" relation.

    Attributes:
        name: Display name of the set
        choices: Ordered choice labels
        beats: Each choice mapped to the list of choices it beats
        explanations: Optional justification text keyed by "winner>loser"
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="Strategy")
    choices: tuple[str, ...]
    beats: dict[str, tuple[str, ...]]
    explanations: dict[str, str] = Field(default_factory=dict)

    @field_validator("choices")
    @classmethod
    def validate_choices(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) < 3:
            raise ValueError(f"A non-transitive set needs at least 3 choices, got {len(v)}")
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate strategy choices: {v}")
        return v

    @model_validator(mode="after")
    def validate_cycle(self) -> "StrategySet":
        choices = set(self.choices)
        if set(self.beats) != choices:
            raise ValueError(
                f"beats must have exactly one entry per choice, "
                f"got {sorted(self.beats)} for {sorted(choices)}"
            )

        for winner, losers in self.beats.items():
            for loser in losers:
                if loser not in choices:
                    raise ValueError(f"{winner!r} beats unknown choice {loser!r}")
                if loser == winner:
                    raise ValueError(f"{winner!r} cannot beat itself")

        # Every distinct pair must be decided exactly one way round.
        for i, a in enumerate(self.choices):
            for b in self.choices[i + 1 :]:
                a_wins = b in self.beats[a]
                b_wins = a in self.beats[b]
                if a_wins == b_wins:
                    relation = "beat each other" if a_wins else "are unrelated"
                    raise ValueError(f"{a!r} and {b!r} {relation}")

        # Non-transitive: nothing dominates and nothing is dominated.
        for choice in self.choices:
            if not self.beats[choice]:
                raise ValueError(f"{choice!r} beats nothing")
            if len(self.beats[choice]) == len(self.choices) - 1:
                raise ValueError(f"{choice!r} beats everything")

        for key in self.explanations:
            winner, sep, loser = key.partition(">")
            if not sep or winner not in choices or loser not in choices:
                raise ValueError(f"Explanation key must be 'winner>loser', got {key!r}")
        return self

    def beats_choice(self, a: str, b: str) -> bool:
        """True if ``a`` beats ``b``."""
        return b in self.beats.get(a, ())

    def explanation_for(self, winner: str, loser: str) -> str | None:
        """Registered justification for ``winner`` beating ``loser``, if any."""
        return self.explanations.get(f"{winner}>{loser}")


class Axis(BaseModel):
    """An opposing pair of stance choices, e.g. vertical: up/down."""

    model_config = ConfigDict(frozen=True)

    name: str
    choices: tuple[str, str]

    @field_validator("choices")
    @classmethod
    def validate_distinct(cls, v: tuple[str, str]) -> tuple[str, str]:
        if v[0] == v[1]:
            raise ValueError(f"Axis choices must differ, got {v}")
        return v

    def opposite(self, choice: str) -> str:
        """The other member of this axis."""
        if choice == self.choices[0]:
            return self.choices[1]
        if choice == self.choices[1]:
            return self.choices[0]
        raise KeyError(f"{choice!r} is not on axis {self.name!r}")


class StanceExplanations(BaseModel):
    """Narration for each stance result."""

    model_config = ConfigDict(frozen=True)

    match: str = "Reader anticipated correctly"
    fooled: str = "Actor deceived the reader on the same axis"
    miss: str = "Different axes, no advantage either way"


class StanceSet(BaseModel):
    """A stance commitment space.

    Attributes:
        name: Display name of the set
        roles: (reader, actor) role names, e.g. ("batter", "pitcher")
        axes: Disjoint two-element axes
        explanations: Narration for match / fooled / miss
    """

    model_config = ConfigDict(frozen=True)

    name: str
    roles: tuple[str, str] = ("reader", "actor")
    axes: tuple[Axis, ...]
    explanations: StanceExplanations = Field(default_factory=StanceExplanations)

    @model_validator(mode="after")
    def validate_axes(self) -> "StanceSet":
        if not self.axes:
            raise ValueError("A stance set needs at least one axis")
        seen: dict[str, str] = {}
        names: set[str] = set()
        for axis in self.axes:
            if axis.name in names:
                raise ValueError(f"Duplicate axis name {axis.name!r}")
            names.add(axis.name)
            for choice in axis.choices:
                if choice in seen:
                    raise ValueError(
                        f"{choice!r} appears on both {seen[choice]!r} and {axis.name!r}"
                    )
                seen[choice] = axis.name
        return self

    @property
    def choices(self) -> tuple[str, ...]:
        """All choices across all axes, in axis order."""
        return tuple(choice for axis in self.axes for choice in axis.choices)


# =============================================================================
# Shipped sets
# =============================================================================

DEFAULT_STRATEGY_SET = StrategySet(
    name="Elements",
    choices=("fire", "grass", "water"),
    beats={
        "fire": ("grass",),
        "grass": ("water",),
        "water": ("fire",),
    },
    explanations={
        "fire>grass": "Fire burns grass",
        "grass>water": "Grass drinks water",
        "water>fire": "Water douses fire",
    },
)

# Batter perspective: power > balance > finesse > power
BASEBALL_STRATEGY_SET = StrategySet(
    name="Approach",
    choices=("power", "finesse", "balance"),
    beats={
        "power": ("balance",),
        "finesse": ("power",),
        "balance": ("finesse",),
    },
    explanations={
        "power>balance": "Power overwhelms a balanced approach",
        "finesse>power": "Finesse exploits an overcommitted power swing",
        "balance>finesse": "Balance stays back and covers the finesse play",
    },
)

BASEBALL_STANCE_SET = StanceSet(
    name="Zone",
    roles=("batter", "pitcher"),
    axes=(
        Axis(name="vertical", choices=("up", "down")),
        Axis(name="horizontal", choices=("in", "out")),
    ),
    explanations=StanceExplanations(
        match="Batter wins by anticipating the pitch location, sitting on it",
        fooled="Pitcher wins by deceiving the batter on the same plane",
        miss="Batter and pitcher on different planes, no advantage either way",
    ),
)

COIN_STANCE_SET = StanceSet(
    name="Coin",
    roles=("caller", "flipper"),
    axes=(Axis(name="side", choices=("heads", "tails")),),
    explanations=StanceExplanations(
        match="Caller guessed correctly",
        fooled="Caller guessed wrong",
        miss="Impossible with a single axis",
    ),
)
