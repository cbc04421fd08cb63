"""Pre-roll matchup resolution for Grapple.

This module implements the two commitment relations resolved before any dice
are rolled:
- Strategy: non-transitive cycle (rock-paper-scissors variant)
- Stance: axis-based read/deceive relation (reader vs actor)

Both resolvers are pure and total given a valid set. Validation of the sets
happens when they are constructed (see grapple.models.choices), never here.
"""

from __future__ import annotations

from enum import Enum

from grapple.models.choices import (
    GENERIC_STRATEGY_LOSE,
    GENERIC_STRATEGY_TIE,
    GENERIC_STRATEGY_WIN,
    Axis,
    StanceSet,
    StrategySet,
)


# =============================================================================
# Strategy
# =============================================================================


class MatchupResult(str, Enum):
    """Strategy result from the first player's perspective."""

    WIN = "win"
    LOSE = "lose"
    TIE = "tie"

    def flipped(self) -> MatchupResult:
        """The same result seen from the other side."""
        if self is MatchupResult.WIN:
            return MatchupResult.LOSE
        if self is MatchupResult.LOSE:
            return MatchupResult.WIN
        return MatchupResult.TIE


def resolve_strategy(a: str, b: str, strategy_set: StrategySet) -> MatchupResult:
    """Resolve a strategy matchup.

    Args:
        a: First player's choice
        b: Second player's choice
        strategy_set: The set defining the "beats" relation

    Returns:
        WIN if a beats b, LOSE if b beats a, TIE if the choices are equal
    """
    if a == b:
        return MatchupResult.TIE
    if strategy_set.beats_choice(a, b):
        return MatchupResult.WIN
    return MatchupResult.LOSE


def explain_strategy(a: str, b: str, strategy_set: StrategySet) -> tuple[MatchupResult, str]:
    """Resolve a strategy matchup and justify it.

    The justification comes from the set's explanation table, falling back to
    a generic sentence when no explanation is registered for the pair.

    Returns:
        Tuple of (result, explanation)
    """
    result = resolve_strategy(a, b, strategy_set)
    if result is MatchupResult.TIE:
        return result, GENERIC_STRATEGY_TIE.format(a=a, b=b)
    if result is MatchupResult.WIN:
        text = strategy_set.explanation_for(a, b) or GENERIC_STRATEGY_WIN.format(a=a, b=b)
    else:
        text = strategy_set.explanation_for(b, a) or GENERIC_STRATEGY_LOSE.format(a=a, b=b)
    return result, text


# =============================================================================
# Stance
# =============================================================================


class StanceResult(str, Enum):
    """Stance result.

    - READER: reader anticipated correctly (exact match)
    - ACTOR: actor deceived the reader (same axis, opposite choice)
    - MISS: different axes, no advantage
    """

    READER = "reader"
    ACTOR = "actor"
    MISS = "miss"


def find_axis(choice: str, stance_set: StanceSet) -> Axis:
    """Find the axis a choice belongs to.

    Raises:
        KeyError: If the choice is not part of the stance set
    """
    for axis in stance_set.axes:
        if choice in axis.choices:
            return axis
    raise KeyError(f"{choice!r} is not a choice in stance set {stance_set.name!r}")


def all_stance_choices(stance_set: StanceSet) -> list[str]:
    """All valid choices of a stance set, in axis order."""
    return list(stance_set.choices)


def resolve_stance(reader_choice: str, actor_choice: str, stance_set: StanceSet) -> StanceResult:
    """Resolve a stance matchup.

    Args:
        reader_choice: What the reader committed to
        actor_choice: What the actor committed to
        stance_set: The set defining the axes

    Returns:
        READER on a match, ACTOR on the same axis, MISS on different axes
    """
    reader_axis = find_axis(reader_choice, stance_set)
    actor_axis = find_axis(actor_choice, stance_set)

    if reader_choice == actor_choice:
        return StanceResult.READER

    # Axes have two members, so a different choice on the same axis is the opposite.
    if reader_axis.name == actor_axis.name:
        return StanceResult.ACTOR
    return StanceResult.MISS


def explain_stance(
    reader_choice: str, actor_choice: str, stance_set: StanceSet
) -> tuple[StanceResult, str]:
    """Resolve a stance matchup and narrate it from the set's explanations."""
    result = resolve_stance(reader_choice, actor_choice, stance_set)
    explanations = stance_set.explanations
    if result is StanceResult.READER:
        return result, explanations.match
    if result is StanceResult.ACTOR:
        return result, explanations.fooled
    return result, explanations.miss
