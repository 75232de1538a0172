"""
Session State - The state of one guessing game.

Design principles:
- Immutable: every guess returns a new Session
- Explicit: no module-level counters, the caller holds the session
- The target never changes after creation
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .target import Target


class SessionStatus(Enum):
    """Status of a guessing session."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Session:
    """
    A single play-through of a guessing game.

    attempts_used never exceeds attempt_limit.
    status leaves IN_PROGRESS exactly once, to WON or LOST.
    """
    target: Target
    attempt_limit: int
    attempts_used: int = 0
    status: SessionStatus = SessionStatus.IN_PROGRESS

    # Normalized guesses, in order (None for unparseable input)
    history: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def attempts_remaining(self) -> int:
        return self.attempt_limit - self.attempts_used

    @property
    def is_active(self) -> bool:
        """Check if the session still accepts guesses."""
        return self.status is SessionStatus.IN_PROGRESS

    def _copy_with(self, **kwargs) -> Session:
        """Create a copy with some fields replaced."""
        return Session(
            target=self.target,
            attempt_limit=self.attempt_limit,
            attempts_used=kwargs.get("attempts_used", self.attempts_used),
            status=kwargs.get("status", self.status),
            history=kwargs.get("history", self.history),
        )
