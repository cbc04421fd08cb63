"""Tier classification for Grapple rolls.

A tier is a pure function of a roll value and a threshold configuration. It
never depends on which side produced the roll. Tier is set by the roll value,
not the margin of victory: a 12 vs 11 is an epic battle and the winner gets a
strong tier, a 4 vs 3 is a slapfight and the winner gets a weak one.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from grapple.parameters import DEFAULT_SOLID_MAX, DEFAULT_WEAK_MAX


class Tier(str, Enum):
    """Strength of a roll.

    Inherits from str for proper JSON serialization.
    """

    WEAK = "weak"
    SOLID = "solid"
    STRONG = "strong"

    @property
    def offset(self) -> int:
        """Ladder offset for this tier (weak=0, solid=1, strong=2)."""
        return tier_to_offset(self)


TIER_ORDER: tuple[Tier, Tier, Tier] = (Tier.WEAK, Tier.SOLID, Tier.STRONG)

_TIER_OFFSETS: dict[Tier, int] = {
    Tier.WEAK: 0,
    Tier.SOLID: 1,
    Tier.STRONG: 2,
}


class TierConfig(BaseModel):
    """Thresholds that classify a roll value into a tier.

    - roll <= weak_max: WEAK
    - weak_max < roll <= solid_max: SOLID
    - roll > solid_max: STRONG
    """

    model_config = ConfigDict(frozen=True)

    weak_max: int = Field(default=DEFAULT_WEAK_MAX)
    solid_max: int = Field(default=DEFAULT_SOLID_MAX)

    @model_validator(mode="after")
    def validate_ordering(self) -> "TierConfig":
        if self.weak_max >= self.solid_max:
            raise ValueError(
                f"weak_max must be below solid_max, got {self.weak_max} >= {self.solid_max}"
            )
        return self

    @classmethod
    def default(cls) -> TierConfig:
        """Default thresholds: <=6 weak, 7-9 solid, 10+ strong."""
        return cls(weak_max=DEFAULT_WEAK_MAX, solid_max=DEFAULT_SOLID_MAX)


DEFAULT_TIER_CONFIG = TierConfig.default()


def get_tier(roll_value: int, config: TierConfig = DEFAULT_TIER_CONFIG) -> Tier:
    """Classify a roll value into a tier.

    Args:
        roll_value: A modified or unmodified roll total
        config: Tier thresholds

    Returns:
        The tier for this roll value

    Examples:
        >>> get_tier(6)
        <Tier.WEAK: 'weak'>
        >>> get_tier(7)
        <Tier.SOLID: 'solid'>
        >>> get_tier(10)
        <Tier.STRONG: 'strong'>
    """
    if roll_value > config.solid_max:
        return Tier.STRONG
    if roll_value > config.weak_max:
        return Tier.SOLID
    return Tier.WEAK


def tier_to_offset(tier: Tier) -> int:
    """Convert a tier to its ladder offset (weak=0, solid=1, strong=2)."""
    return _TIER_OFFSETS[tier]
