"""Tests for scripts/enumerate_odds.py."""

import json
from pathlib import Path

import pytest

# Import from scripts directory
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from enumerate_odds import (
    battle_output,
    format_sample,
    ladders_output,
    main,
    results_output,
    sample_contests,
)
from grapple.dice import DiceRoller
from grapple.models.rewards import ModifierConfig
from grapple.models.tiers import DEFAULT_TIER_CONFIG


class TestOutputs:
    """Tests for the report builders."""

    def test_battle_json(self) -> None:
        data = json.loads(battle_output(0, 0, DEFAULT_TIER_CONFIG, "json"))
        assert data["wins_a"] == 575
        assert data["ties"] == 146

    def test_results_single_tier(self) -> None:
        data = json.loads(results_output("batter", "solid", DEFAULT_TIER_CONFIG, "json"))
        assert len(data) == 1
        assert data[0]["position_counts"] == [1, 14, 15, 5, 1]

    def test_results_all_tiers_text(self) -> None:
        text = results_output("pitcher", None, DEFAULT_TIER_CONFIG, "text")
        assert text.count("Battle Tier:") == 3

    def test_ladders(self) -> None:
        text = ladders_output(DEFAULT_TIER_CONFIG)
        assert "Tier Rules" in text
        assert "Pitcher Controls (3 Walk) - Result Ladder" in text


class TestSample:
    """Tests for seeded CPU sampling."""

    def test_tallies_cover_every_contest(self) -> None:
        summary = sample_contests(
            50, ModifierConfig.default(), DEFAULT_TIER_CONFIG, DiceRoller(seed=4)
        )
        assert sum(summary["battle_winners"].values()) == 50
        assert sum(summary["outcomes"].values()) == 50
        assert sum(summary["battle_tiers"].values()) == 50
        assert summary["seed"] == 4

    def test_reproducible(self) -> None:
        config = ModifierConfig.speed_mode()
        first = sample_contests(30, config, DEFAULT_TIER_CONFIG, DiceRoller(seed=9))
        second = sample_contests(30, config, DEFAULT_TIER_CONFIG, DiceRoller(seed=9))
        assert first == second

    def test_format(self) -> None:
        summary = sample_contests(10, ModifierConfig.default(), DEFAULT_TIER_CONFIG, DiceRoller(seed=1))
        assert "Sampled 10 contests (seed=1)" in format_sample(summary)


class TestMain:
    """Tests for the command line entry point."""

    def test_battle_mode(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["battle", "--mod-a", "1", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["modifier_a"] == 1
        assert data["wins_a"] > data["wins_b"]

    def test_curve_mode(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["curve", "--modifiers", "0", "2"]) == 0
        assert "2d6+2" in capsys.readouterr().out

    def test_sample_mode_seeded(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["sample", "--contests", "20", "--seed", "3", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["contests"] == 20
        assert data["seed"] == 3

    def test_sample_mode_env_seed(
        self, capsys: pytest.CaptureFixture, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GRAPPLE_SEED", "17")
        assert main(["sample", "--contests", "5", "--format", "json"]) == 0
        assert json.loads(capsys.readouterr().out)["seed"] == 17

    def test_invalid_thresholds(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["battle", "--weak-max", "9", "--solid-max", "9"]) == 1
        assert "Invalid tier thresholds" in capsys.readouterr().err

    def test_output_file(self, tmp_path: Path) -> None:
        target = tmp_path / "reports" / "battle.json"
        assert main(["battle", "--format", "json", "--output", str(target)]) == 0
        assert json.loads(target.read_text())["ties"] == 146
