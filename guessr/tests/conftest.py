"""
Pytest fixtures for Guessr tests.
"""

import random

import pytest

from ..engine_core import NumericTarget, Session, StringTarget, create_session


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator for deterministic draws."""
    return random.Random(1234)


@pytest.fixture
def color_session() -> Session:
    """Favorite color game: target 'blue', 10 attempts."""
    return create_session(StringTarget("blue"), 10)


@pytest.fixture
def number_session() -> Session:
    """Secret number game: target 7 in [1, 100], 3 attempts."""
    return create_session(NumericTarget(value=7, minimum=1, maximum=100), 3)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep GUESSR_* variables from the host out of the tests."""
    monkeypatch.delenv("GUESSR_ATTEMPTS", raising=False)
    monkeypatch.delenv("GUESSR_SEED", raising=False)
