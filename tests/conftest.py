"""Shared pytest fixtures and markers for all tests."""

import pytest

from grapple.dice import DiceRoller, reset_random


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "enumeration: marks exhaustive dice-space tests"
    )


@pytest.fixture(autouse=True)
def fresh_default_roller():
    """Give every test an unseeded process-wide roller and restore it afterwards."""
    reset_random()
    yield
    reset_random()


@pytest.fixture
def scripted():
    """Build a roller that replays the given die faces in order."""
    def _build(*faces: int) -> DiceRoller:
        return DiceRoller.from_faces(faces)
    return _build


@pytest.fixture
def seeded_roller() -> DiceRoller:
    """Provide a reproducible roller."""
    return DiceRoller(seed=1234)
