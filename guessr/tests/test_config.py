"""
Tests for game configuration.

Validates that:
- Defaults match the classic games (blue, 1-100, 10 attempts)
- Environment variables override defaults
- Invalid settings raise ConfigurationError
"""

import pytest

from ..config import ColorGameConfig, NumberGameConfig, load_config
from ..engine_core import ConfigurationError, NumericTarget, SessionStatus, StringTarget


class TestDefaults:
    """Tests for default settings."""

    def test_color_defaults(self):
        config = load_config("color")

        assert isinstance(config, ColorGameConfig)
        assert config.color == "blue"
        assert config.attempts == 10

    def test_number_defaults(self):
        config = load_config("number")

        assert isinstance(config, NumberGameConfig)
        assert (config.minimum, config.maximum) == (1, 100)
        assert config.seed is None

    def test_none_overrides_ignored(self):
        config = load_config("color", color=None, attempts=None)
        assert config.color == "blue"


class TestEnvironment:
    """Tests for GUESSR_* variables."""

    def test_attempts_from_env(self, monkeypatch):
        monkeypatch.setenv("GUESSR_ATTEMPTS", "4")
        assert load_config("color").attempts == 4

    def test_seed_from_env(self, monkeypatch):
        monkeypatch.setenv("GUESSR_SEED", "17")
        assert load_config("number").seed == 17

    def test_override_beats_env(self, monkeypatch):
        monkeypatch.setenv("GUESSR_ATTEMPTS", "4")
        assert load_config("number", attempts=6).attempts == 6

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("GUESSR_ATTEMPTS", "many")
        with pytest.raises(ConfigurationError):
            load_config("color")


class TestValidation:
    """Tests for invalid settings."""

    def test_zero_attempts(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config("color", attempts=0)
        assert any("attempts" in e for e in exc_info.value.errors)

    def test_inverted_range(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config("number", minimum=10, maximum=1)
        assert "invalid range" in exc_info.value.errors[0]

    def test_empty_color(self):
        with pytest.raises(ConfigurationError):
            load_config("color", color="")

    def test_unknown_game(self):
        with pytest.raises(ConfigurationError):
            load_config("chess")


class TestBuildSession:
    """Tests for building sessions from config."""

    def test_color_session(self):
        session = load_config("color", color="Green", attempts=3).build_session()

        assert session.target == StringTarget("Green")
        assert session.attempt_limit == 3
        assert session.status is SessionStatus.IN_PROGRESS

    def test_number_session_in_range(self):
        session = load_config("number", minimum=5, maximum=9).build_session()

        assert isinstance(session.target, NumericTarget)
        assert 5 <= session.target.value <= 9

    def test_seeded_sessions_match(self):
        config = load_config("number", seed=42)
        assert config.build_session().target == config.build_session().target
