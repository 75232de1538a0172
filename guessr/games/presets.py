"""
Game Presets - The two built-in guessing games.

A preset holds the presentation text of a game. The target and attempt
limit come from configuration (see guessr.config).
"""

from __future__ import annotations
from dataclasses import dataclass

from ..engine_core.errors import ConfigurationError


@dataclass(frozen=True)
class GamePreset:
    """Presentation text for one game."""
    name: str  # CLI subcommand name
    title: str  # Shown in the welcome banner
    subject: str  # "my favorite color", "the secret number"
    prompt: str  # Printed before reading each guess

    @property
    def welcome(self) -> str:
        return f"Welcome to the {self.title} Guessing Game!"


COLOR_GAME = GamePreset(
    name="color",
    title="Favorite Color",
    subject="my favorite color",
    prompt="Guess my favorite color: ",
)

NUMBER_GAME = GamePreset(
    name="number",
    title="Secret Number",
    subject="the secret number",
    prompt="Guess the secret number: ",
)

PRESETS: dict[str, GamePreset] = {
    COLOR_GAME.name: COLOR_GAME,
    NUMBER_GAME.name: NUMBER_GAME,
}


def get_preset(name: str) -> GamePreset:
    """Look up a preset by name."""
    try:
        return PRESETS[name]
    except KeyError:
        raise ConfigurationError(
            [f"unknown game '{name}' (choose from: {', '.join(sorted(PRESETS))})"]
        ) from None


def challenge_line(preset: GamePreset, attempt_limit: int) -> str:
    return f"Can you guess {preset.subject} in less than {attempt_limit} guesses?"
