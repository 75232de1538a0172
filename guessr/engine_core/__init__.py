"""
Engine Core - Bounded-attempt guessing sessions.

The engine:
1. Creates a session around a fixed target
2. Scores each submitted guess
3. Ends the session as WON or LOST
4. Renders outcomes as display text
"""

from .errors import GuessrError, ConfigurationError, InvalidStateError
from .target import Target, StringTarget, NumericTarget, Hint
from .state import Session, SessionStatus
from .outcome import Outcome, OutcomeKind, describe_outcome
from .reducer import GuessResult, create_session, submit_guess

__all__ = [
    "GuessrError",
    "ConfigurationError",
    "InvalidStateError",
    "Target",
    "StringTarget",
    "NumericTarget",
    "Hint",
    "Session",
    "SessionStatus",
    "Outcome",
    "OutcomeKind",
    "describe_outcome",
    "GuessResult",
    "create_session",
    "submit_guess",
]
