#!/usr/bin/env python3
"""
Exact odds for Grapple contests - enumeration over every dice combination.

Battle odds walk all 1296 2d6-vs-2d6 combinations and result odds walk all 36
result rolls, so every percentage is exact. The sample mode plays seeded CPU
contests for comparison with the exact numbers.

Usage:
    python scripts/enumerate_odds.py battle --mod-a 1 --mod-b -1
    python scripts/enumerate_odds.py results --ladder pitcher --format json
    python scripts/enumerate_odds.py curve --modifiers 0 1 2 3
    python scripts/enumerate_odds.py ladders
    python scripts/enumerate_odds.py sample --contests 500 --seed 42
    python scripts/enumerate_odds.py --help

GRAPPLE_SEED seeds the sample mode when --seed is not given.
"""

import argparse
import json
import logging
import sys
from collections import Counter
from pathlib import Path

from grapple.dice import DiceRoller, get_default_roller, seed_from_env, set_seed
from grapple.engine.contest import resolve_contest
from grapple.engine.enumeration import enumerate_all_results, enumerate_battles, enumerate_results
from grapple.models.choices import BASEBALL_STANCE_SET, BASEBALL_STRATEGY_SET
from grapple.models.outcomes import BATTER_LADDER, PITCHER_LADDER, SHIPPED_LADDERS
from grapple.models.rewards import ModifierConfig
from grapple.models.tiers import TIER_ORDER, Tier, TierConfig
from grapple.opponents import cpu_commitment
from grapple.reports import (
    format_battle_enumeration,
    format_modifier_curve,
    format_result_enumeration,
    format_result_ladder,
    format_result_table,
    format_tier_rules,
)

logger = logging.getLogger("enumerate_odds")

MODIFIER_MODES = {
    "symmetric": ModifierConfig.symmetric,
    "winner-only": ModifierConfig.winner_only,
    "speed": ModifierConfig.speed_mode,
}


def battle_output(mod_a: int, mod_b: int, tier_config: TierConfig, fmt: str) -> str:
    """Exact battle odds for a modifier pair."""
    report = enumerate_battles(mod_a, mod_b, tier_config)
    if fmt == "json":
        return json.dumps(report.to_dict(), indent=2)
    return format_battle_enumeration(report)


def results_output(ladder_key: str, tier: str | None, tier_config: TierConfig, fmt: str) -> str:
    """Exact result odds on one ladder, for one battle tier or all three."""
    ladder = SHIPPED_LADDERS[ladder_key]
    if tier is None:
        reports = enumerate_all_results(ladder, tier_config)
    else:
        reports = [enumerate_results(Tier(tier), ladder, tier_config)]
    if fmt == "json":
        return json.dumps([r.to_dict() for r in reports], indent=2)
    return "\n\n".join(format_result_enumeration(r) for r in reports)


def ladders_output(tier_config: TierConfig) -> str:
    """Tier rules plus every shipped ladder and its result table."""
    sections = [format_tier_rules(tier_config)]
    for ladder in SHIPPED_LADDERS.values():
        sections.append(format_result_ladder(ladder))
        sections.append(format_result_table(ladder, tier_config))
    return "\n\n".join(sections)


def sample_contests(
    contests: int,
    modifiers: ModifierConfig,
    tier_config: TierConfig,
    roller: DiceRoller,
) -> dict:
    """Play random CPU-vs-CPU contests and tally who won and what happened."""
    winners: Counter[str] = Counter()
    outcomes: Counter[str] = Counter()
    tiers: Counter[str] = Counter()
    rerolled = 0

    for _ in range(contests):
        batter = cpu_commitment(BASEBALL_STRATEGY_SET, BASEBALL_STANCE_SET, roller)
        pitcher = cpu_commitment(BASEBALL_STRATEGY_SET, BASEBALL_STANCE_SET, roller)
        contest = resolve_contest(
            batter,
            pitcher,
            modifiers=modifiers,
            tier_config=tier_config,
            batter_ladder=BATTER_LADDER,
            pitcher_ladder=PITCHER_LADDER,
            roller=roller,
        )
        winners["batter" if contest.batter_won_battle else "pitcher"] += 1
        outcomes[contest.outcome.value] += 1
        tiers[contest.battle.tier.value] += 1
        if contest.battle.attempts > 1:
            rerolled += 1

    return {
        "contests": contests,
        "seed": roller.seed,
        "battle_winners": dict(winners),
        "battle_tiers": {tier.value: tiers[tier.value] for tier in TIER_ORDER},
        "outcomes": dict(sorted(outcomes.items())),
        "rerolled_battles": rerolled,
    }


def format_sample(summary: dict) -> str:
    lines = [f"Sampled {summary['contests']} contests (seed={summary['seed']})"]
    lines.append("=" * len(lines[0]))
    total = summary["contests"] or 1
    for side, count in sorted(summary["battle_winners"].items()):
        lines.append(f"  {side:<8} wins battle: {count:>5} ({count / total * 100:5.1f}%)")
    lines.append("Outcomes:")
    for outcome, count in summary["outcomes"].items():
        lines.append(f"  {outcome.upper():<5}: {count:>5} ({count / total * 100:5.1f}%)")
    lines.append(f"Battles needing a reroll: {summary['rerolled_battles']}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the enumerate_odds script.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Exact odds for Grapple battles and result rolls.",
        epilog="""
Modes:
  battle   Exact 2d6+mod vs 2d6+mod odds (1296 combinations, ties counted)
  results  Exact result-roll odds on a ladder (36 combinations per tier)
  curve    How modifiers shift the 2d6 curve across tiers
  ladders  Tier rules and every shipped ladder
  sample   Seeded CPU-vs-CPU contests for comparison
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "mode",
        choices=["battle", "results", "curve", "ladders", "sample"],
        help="What to report",
    )

    parser.add_argument("--mod-a", type=int, default=0, help="Side A (batter) modifier")
    parser.add_argument("--mod-b", type=int, default=0, help="Side B (pitcher) modifier")

    parser.add_argument(
        "--ladder",
        choices=sorted(SHIPPED_LADDERS),
        default="batter",
        help="Ladder for results mode (default: batter)",
    )

    parser.add_argument(
        "--tier",
        choices=[tier.value for tier in TIER_ORDER],
        default=None,
        help="Battle tier for results mode (default: all three)",
    )

    parser.add_argument(
        "--modifiers",
        type=int,
        nargs="+",
        default=[0, 1, 2, 3],
        help="Modifiers for curve mode (default: 0 1 2 3)",
    )

    parser.add_argument("--weak-max", type=int, default=None, help="Override the weak tier ceiling")
    parser.add_argument(
        "--solid-max", type=int, default=None, help="Override the solid tier ceiling"
    )

    parser.add_argument(
        "--rewards",
        choices=sorted(MODIFIER_MODES),
        default="symmetric",
        help="Reward table for sample mode (default: symmetric)",
    )

    parser.add_argument("--contests", type=int, default=1000, help="Contests for sample mode")
    parser.add_argument("--seed", type=int, default=None, help="Seed for sample mode")

    parser.add_argument(
        "-f", "--format",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output path (default: stdout)",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine trace to stderr")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    overrides = {}
    if args.weak_max is not None:
        overrides["weak_max"] = args.weak_max
    if args.solid_max is not None:
        overrides["solid_max"] = args.solid_max
    try:
        tier_config = TierConfig(**overrides)
    except ValueError as e:
        print(f"Error: Invalid tier thresholds: {e}", file=sys.stderr)
        return 1

    if args.mode == "battle":
        output = battle_output(args.mod_a, args.mod_b, tier_config, args.format)
    elif args.mode == "results":
        output = results_output(args.ladder, args.tier, tier_config, args.format)
    elif args.mode == "curve":
        output = format_modifier_curve(args.modifiers, tier_config)
    elif args.mode == "ladders":
        output = ladders_output(tier_config)
    else:
        if args.seed is not None:
            set_seed(args.seed)
        else:
            seed_from_env()
        summary = sample_contests(
            args.contests,
            MODIFIER_MODES[args.rewards](),
            tier_config,
            get_default_roller(),
        )
        output = json.dumps(summary, indent=2) if args.format == "json" else format_sample(summary)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w") as f:
            f.write(output)
        logger.info(f"Report written to {args.output}")
        print(f"Report written to {args.output}")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
