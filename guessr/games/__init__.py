"""
Games module - The built-in guessing games.

Each game is a preset with its banner and prompt text:
- color: guess my favorite color
- number: guess the secret number
"""

from .presets import (
    GamePreset,
    COLOR_GAME,
    NUMBER_GAME,
    PRESETS,
    get_preset,
    challenge_line,
)

__all__ = [
    "GamePreset",
    "COLOR_GAME",
    "NUMBER_GAME",
    "PRESETS",
    "get_preset",
    "challenge_line",
]
