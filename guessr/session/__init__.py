"""
Session Module - Runs one game against line-based input.

Sessions are EPHEMERAL:
- No persistence
- One session per game run
- Discarded once the game is won or lost
"""

from .game_loop import GameLoop, LoopState, LoopResult

__all__ = [
    "GameLoop",
    "LoopState",
    "LoopResult",
]
