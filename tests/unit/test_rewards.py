"""Unit tests for reward tables."""

from grapple.models.rewards import DEFAULT_MODIFIER_CONFIG, ModifierConfig


class TestModifierConfig:
    """Named constructors pick the reward policy."""

    def test_default_is_symmetric(self) -> None:
        assert DEFAULT_MODIFIER_CONFIG == ModifierConfig.symmetric()
        assert DEFAULT_MODIFIER_CONFIG.strategy.win == 1
        assert DEFAULT_MODIFIER_CONFIG.strategy.lose == -1
        assert DEFAULT_MODIFIER_CONFIG.stance.winner == 1
        assert DEFAULT_MODIFIER_CONFIG.stance.loser == -1

    def test_winner_only(self) -> None:
        config = ModifierConfig.winner_only()
        assert config.strategy.lose == 0
        assert config.stance.loser == 0
        assert config.stance.miss == 0

    def test_speed_mode(self) -> None:
        config = ModifierConfig.speed_mode()
        assert (config.strategy.win, config.strategy.lose) == (1, -1)
        assert (config.stance.winner, config.stance.loser) == (1, 0)

    def test_custom_swing(self) -> None:
        config = ModifierConfig.symmetric(strategy_swing=2, stance_swing=3)
        assert (config.strategy.win, config.strategy.lose) == (2, -2)
        assert (config.stance.winner, config.stance.loser) == (3, -3)
