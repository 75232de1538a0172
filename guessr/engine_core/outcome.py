"""
Outcomes - The result of a single submitted guess.

Every guess produces exactly one outcome:
- RETRY: wrong guess, attempts remain
- WON: the guess matched the target
- LOST: wrong guess and no attempts remain; the target is revealed
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, TYPE_CHECKING

from .target import Hint

if TYPE_CHECKING:
    from ..games.presets import GamePreset


class OutcomeKind(Enum):
    """Kinds of outcome a guess can have."""
    RETRY = "retry"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Outcome:
    """
    Outcome of one guess.

    attempts_remaining is set for RETRY, revealed_target for LOST.
    hint is only set for numeric RETRY outcomes where the guess parsed.
    """
    kind: OutcomeKind
    attempts_remaining: int | None = None
    revealed_target: Any | None = None
    hint: Hint | None = None

    @property
    def is_terminal(self) -> bool:
        return self.kind is not OutcomeKind.RETRY

    @classmethod
    def won(cls) -> Outcome:
        """Factory for a winning outcome."""
        return cls(kind=OutcomeKind.WON)

    @classmethod
    def lost(cls, revealed_target: Any) -> Outcome:
        """Factory for a losing outcome."""
        return cls(kind=OutcomeKind.LOST, revealed_target=revealed_target)

    @classmethod
    def retry(cls, attempts_remaining: int, hint: Hint | None = None) -> Outcome:
        """Factory for a retry outcome."""
        return cls(
            kind=OutcomeKind.RETRY,
            attempts_remaining=attempts_remaining,
            hint=hint,
        )


def describe_outcome(outcome: Outcome, preset: GamePreset | None = None) -> str:
    """
    Render an outcome as display text.

    The subject ("my favorite color", "the secret number") comes from the
    preset when given; otherwise a generic "the answer" is used.
    Multi-line results are joined with newlines.
    """
    subject = preset.subject if preset else "the answer"

    if outcome.kind is OutcomeKind.WON:
        return "Congratulations! You guessed it right!"

    if outcome.kind is OutcomeKind.LOST:
        return (
            "Sorry, you ran out of attempts. "
            f"{subject[0].upper()}{subject[1:]} is {outcome.revealed_target}."
        )

    lines = [f"Oops! That is not {subject}. Try again!"]
    if outcome.hint is Hint.HIGHER:
        lines.append("Go higher.")
    elif outcome.hint is Hint.LOWER:
        lines.append("Go lower.")
    lines.append(f"{outcome.attempts_remaining} left")
    return "\n".join(lines)
