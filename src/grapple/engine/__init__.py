"""Contest engine for Grapple.

This module contains the core resolution logic:
- matchup: Strategy (non-transitive cycle) and stance (axis read) resolvers
- commit: Combines both matchups into per-side dice modifiers
- battle: Opposed 2d6 battle roll with criticals and bounded reroll
- result: Result roll mapped onto a 5-slot ladder
- contest: The full commit -> battle -> result pipeline
- enumeration: Exact probabilities over the 36/1296 dice combinations

Usage:
    from grapple.dice import DiceRoller
    from grapple.engine import PlayerCommitment, resolve_contest

    roller = DiceRoller(seed=42)
    contest = resolve_contest(
        PlayerCommitment(strategy="power", stance="up"),
        PlayerCommitment(strategy="finesse", stance="down"),
        roller=roller,
    )
    print(contest.result.label)

    # Exact odds instead of sampling
    from grapple.engine import enumerate_battles
    report = enumerate_battles(modifier_a=1, modifier_b=-1)
    print(f"A wins {report.win_pct_a:.1f}%")
"""

from grapple.engine.battle import (
    BattleDecision,
    BattleOutcome,
    ChallengeOutcome,
    RerollLimitExceeded,
    Side,
    challenge_roll,
    compare_totals,
    decide_battle,
    decide_challenge,
    roll_battle,
)
from grapple.engine.commit import (
    CommitResult,
    LayerResolution,
    PlayerCommitment,
    resolve_commit,
    stance_modifiers,
    strategy_modifiers,
)
from grapple.engine.contest import ContestResult, resolve_contest, select_ladder
from grapple.engine.enumeration import (
    BattleEnumeration,
    ResultEnumeration,
    TierDistribution,
    enumerate_all_results,
    enumerate_battles,
    enumerate_results,
    modifier_tier_distribution,
    pair_sum_distribution,
)
from grapple.engine.matchup import (
    MatchupResult,
    StanceResult,
    all_stance_choices,
    explain_stance,
    explain_strategy,
    find_axis,
    resolve_stance,
    resolve_strategy,
)
from grapple.engine.result import (
    CriticalRoll,
    ResultOutcome,
    detect_critical,
    ladder_position,
    resolve_result,
)

__all__ = [
    # Matchups
    "MatchupResult",
    "StanceResult",
    "resolve_strategy",
    "explain_strategy",
    "find_axis",
    "all_stance_choices",
    "resolve_stance",
    "explain_stance",
    # Commit
    "PlayerCommitment",
    "LayerResolution",
    "CommitResult",
    "resolve_commit",
    "strategy_modifiers",
    "stance_modifiers",
    # Battle
    "Side",
    "BattleDecision",
    "BattleOutcome",
    "RerollLimitExceeded",
    "compare_totals",
    "decide_battle",
    "roll_battle",
    "ChallengeOutcome",
    "decide_challenge",
    "challenge_roll",
    # Result
    "CriticalRoll",
    "ResultOutcome",
    "detect_critical",
    "ladder_position",
    "resolve_result",
    # Contest
    "ContestResult",
    "resolve_contest",
    "select_ladder",
    # Enumeration
    "BattleEnumeration",
    "ResultEnumeration",
    "TierDistribution",
    "enumerate_battles",
    "enumerate_results",
    "enumerate_all_results",
    "modifier_tier_distribution",
    "pair_sum_distribution",
]
