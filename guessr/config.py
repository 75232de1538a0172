"""
Game Configuration - Pydantic models for game settings.

Defaults can be overridden from the environment:
    GUESSR_ATTEMPTS   Attempt limit for every game (default 10)
    GUESSR_SEED       Seed for the secret number draw (default: random)

Invalid settings raise ConfigurationError, never pydantic's ValidationError.
"""

from __future__ import annotations
import os
import random

from pydantic import BaseModel, Field, ValidationError, model_validator

from .engine_core import (
    ConfigurationError,
    NumericTarget,
    Session,
    StringTarget,
    create_session,
)

DEFAULT_ATTEMPTS = 10
DEFAULT_COLOR = "blue"
DEFAULT_MIN_NUMBER = 1
DEFAULT_MAX_NUMBER = 100


class ColorGameConfig(BaseModel):
    """Settings for the favorite color game."""
    color: str = Field(default=DEFAULT_COLOR, min_length=1)
    attempts: int = Field(default=DEFAULT_ATTEMPTS, gt=0)

    model_config = {"frozen": True}

    def build_session(self) -> Session:
        return create_session(StringTarget(self.color), self.attempts)


class NumberGameConfig(BaseModel):
    """Settings for the secret number game."""
    minimum: int = DEFAULT_MIN_NUMBER
    maximum: int = DEFAULT_MAX_NUMBER
    attempts: int = Field(default=DEFAULT_ATTEMPTS, gt=0)
    seed: int | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_range(self) -> NumberGameConfig:
        if self.minimum > self.maximum:
            raise ValueError(
                f"invalid range: min ({self.minimum}) > max ({self.maximum})"
            )
        return self

    def build_session(self, rng: random.Random | None = None) -> Session:
        rng = rng or random.Random(self.seed)
        target = NumericTarget.draw(self.minimum, self.maximum, rng)
        return create_session(target, self.attempts)


GameConfig = ColorGameConfig | NumberGameConfig

_CONFIG_MODELS: dict[str, type[BaseModel]] = {
    "color": ColorGameConfig,
    "number": NumberGameConfig,
}


def environment_defaults(game: str) -> dict[str, str]:
    """Collect overrides from GUESSR_* environment variables."""
    defaults: dict[str, str] = {}
    attempts = os.getenv("GUESSR_ATTEMPTS")
    if attempts:
        defaults["attempts"] = attempts
    seed = os.getenv("GUESSR_SEED")
    if seed and game == "number":
        defaults["seed"] = seed
    return defaults


def load_config(game: str, **overrides) -> GameConfig:
    """
    Build a validated config for a game.

    Precedence: explicit overrides (None values are ignored), then
    environment variables, then model defaults.

    Raises:
        ConfigurationError: Unknown game or invalid settings
    """
    model = _CONFIG_MODELS.get(game)
    if model is None:
        raise ConfigurationError([f"unknown game '{game}'"])

    values: dict[str, object] = environment_defaults(game)
    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return model(**values)
    except ValidationError as e:
        raise ConfigurationError([_format_error(err) for err in e.errors()]) from e


def _format_error(err: dict) -> str:
    location = ".".join(str(part) for part in err.get("loc", ()))
    message = err.get("msg", "invalid value")
    return f"{location}: {message}" if location else message
