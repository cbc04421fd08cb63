"""Plain-text reports for ladders, tiers and enumeration results.

Every function returns a string; printing is left to the caller (see
scripts/enumerate_odds.py).
"""

from __future__ import annotations

from grapple.engine.enumeration import (
    BattleEnumeration,
    ResultEnumeration,
    modifier_tier_distribution,
    pair_sum_distribution,
)
from grapple.engine.result import ladder_position
from grapple.models.outcomes import ResultLadder
from grapple.models.tiers import DEFAULT_TIER_CONFIG, TIER_ORDER, TierConfig, get_tier
from grapple.parameters import MAX_LADDER_POSITION, PAIR_COMBINATIONS


def _title(text: str, rule: str = "=") -> list[str]:
    return [text, rule * len(text)]


def tier_headings(tier_config: TierConfig = DEFAULT_TIER_CONFIG) -> list[str]:
    """Column headings such as 'Weak (<=6)', 'Solid (7-9)', 'Strong (10+)'."""
    return [
        f"Weak (<={tier_config.weak_max})",
        f"Solid ({tier_config.weak_max + 1}-{tier_config.solid_max})",
        f"Strong ({tier_config.solid_max + 1}+)",
    ]


def format_tier_rules(tier_config: TierConfig = DEFAULT_TIER_CONFIG) -> str:
    """Describe the tier thresholds and their ladder offsets."""
    lines = _title("Tier Rules")
    for tier, heading in zip(TIER_ORDER, tier_headings(tier_config)):
        lines.append(f"  {heading:<14} offset +{tier.offset}")
    lines.append("Tier comes from the roll value, not the margin of victory.")
    return "\n".join(lines)


def format_result_ladder(ladder: ResultLadder) -> str:
    """List each ladder position with its outcome and label."""
    lines = _title(f"{ladder.name} - Result Ladder")
    lines.append("Position -> Outcome")
    for position, outcome in enumerate(ladder.outcomes):
        note = ""
        if position == 0:
            note = f" (worst for {ladder.controller})"
        elif position == MAX_LADDER_POSITION:
            note = f" (best for {ladder.controller})"
        lines.append(f"  {position}: {outcome.value.upper():<5} {ladder.label_for(outcome)}{note}")
    return "\n".join(lines)


def format_result_table(
    ladder: ResultLadder, tier_config: TierConfig = DEFAULT_TIER_CONFIG
) -> str:
    """Battle tier (rows) x result tier (columns) grid of non-critical outcomes."""
    headings = tier_headings(tier_config)
    width = max(len(h) for h in headings)
    lines = _title(f"{ladder.name} - Result Table")
    lines.append(" " * 8 + " | " + " | ".join(h.ljust(width) for h in headings))
    lines.append("-" * 8 + "-+-" + "-+-".join("-" * width for _ in headings))
    for battle_tier in TIER_ORDER:
        cells = [
            ladder.outcome_at(ladder_position(battle_tier, result_tier)).value.upper().ljust(width)
            for result_tier in TIER_ORDER
        ]
        lines.append(f"{battle_tier.value.capitalize():<8} | " + " | ".join(cells))
    lines.append("Snake eyes (2) -> position 0")
    lines.append(f"Boxcars (12) -> position {MAX_LADDER_POSITION}")
    return "\n".join(lines)


def format_battle_enumeration(report: BattleEnumeration) -> str:
    """Win/tie split and tier breakdown of an enumerated battle."""
    total = report.total_combinations
    lines = _title(
        f"Battle: A{report.modifier_a:+d} vs B{report.modifier_b:+d} ({total} combinations)"
    )
    lines.append(f"  A wins: {report.wins_a:>4} ({report.win_pct_a:5.1f}%)")
    lines.append(f"  B wins: {report.wins_b:>4} ({report.win_pct_b:5.1f}%)")
    lines.append(f"  Ties:   {report.ties:>4} ({report.tie_pct:5.1f}%)")
    lines.append("")
    lines.append("Tier breakdown (share of decisive battles):")
    for tier in TIER_ORDER:
        lines.append(
            f"  {tier.value:<7} A={report.tiers_a[tier]:>4} B={report.tiers_b[tier]:>4} "
            f"({report.decisive_tier_share(tier):5.1f}%)"
        )
    return "\n".join(lines)


def format_result_enumeration(report: ResultEnumeration) -> str:
    """Outcome and position distribution of an enumerated result roll."""
    lines = _title(f"{report.ladder_name} - Battle Tier: {report.battle_tier.value.upper()}")
    lines.append(f"Outcome distribution ({report.total_combinations} combinations):")
    for outcome, count in report.outcome_counts.items():
        if count > 0:
            lines.append(
                f"  {outcome.value.upper():<5}: {count:>2} ({report.outcome_pct(outcome):5.1f}%)"
            )
    lines.append("Position distribution:")
    for position, count in enumerate(report.position_counts):
        lines.append(f"  Position {position}: {count:>2} ({report.position_pct(position):5.1f}%)")
    lines.append(f"Criticals: snake eyes {report.snake_eyes} | boxcars {report.boxcars}")
    return "\n".join(lines)


def format_modifier_curve(
    modifiers: list[int], tier_config: TierConfig = DEFAULT_TIER_CONFIG
) -> str:
    """Show how modifiers shift the 2d6 bell curve and each tier's share."""
    sums = pair_sum_distribution()
    lowest = min(sums) + min(modifiers)
    highest = max(sums) + max(modifiers)

    lines = _title("2d6 Distribution With Modifiers")
    lines.append("Roll  " + "".join(f"{f'2d6{m:+d}':>8}" for m in modifiers) + " | Tier")
    for value in range(lowest, highest + 1):
        cells = []
        for modifier in modifiers:
            count = sums.get(value - modifier, 0)
            cells.append(f"{count / PAIR_COMBINATIONS * 100:7.1f}%" if count else "       -")
        tier = get_tier(value, tier_config).value.capitalize()
        lines.append(f"{value:>4}  " + "".join(cells) + f" | {tier}")

    lines.append("")
    headings = tier_headings(tier_config)
    lines.extend(_title("Tier Probabilities By Modifier", "-"))
    lines.append(" Mod" + "".join(f"{h:>15}" for h in headings))
    for modifier in modifiers:
        distribution = modifier_tier_distribution(modifier, tier_config)
        lines.append(
            f"{modifier:+4d}" + "".join(f"{distribution.pct(t):14.1f}%" for t in TIER_ORDER)
        )
    return "\n".join(lines)
