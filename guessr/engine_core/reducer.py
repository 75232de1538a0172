"""
Reducer - Creates sessions and applies guesses to them.

The reducer is the single point of state change.
All guesses go through submit_guess().

Design principles:
- Pure function: (session, raw_input) -> (new_session, outcome)
- Each guess is processed exactly once and yields exactly one outcome
- Malformed input is scored as a wrong guess, never raised
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .errors import ConfigurationError, InvalidStateError
from .outcome import Outcome
from .state import Session, SessionStatus
from .target import Target, StringTarget, NumericTarget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuessResult:
    """Result of submitting a guess: the advanced session and its outcome."""
    session: Session
    outcome: Outcome


def create_session(target: Target, attempt_limit: int) -> Session:
    """
    Create a new guessing session.

    Args:
        target: The value to guess (StringTarget or NumericTarget)
        attempt_limit: Maximum number of guesses, must be > 0

    Returns:
        New Session with status IN_PROGRESS and no attempts used

    Raises:
        ConfigurationError: If the attempt limit or target is invalid
    """
    errors: list[str] = []
    if isinstance(attempt_limit, bool) or not isinstance(attempt_limit, int):
        errors.append("attempt_limit must be an integer")
    elif attempt_limit <= 0:
        errors.append(f"attempt_limit must be > 0 (got {attempt_limit})")
    if not isinstance(target, (StringTarget, NumericTarget)):
        errors.append(f"unsupported target type: {type(target).__name__}")
    if errors:
        raise ConfigurationError(errors)

    logger.info(
        f"Session created: {type(target).__name__} target, "
        f"{attempt_limit} attempt(s)"
    )
    return Session(target=target, attempt_limit=attempt_limit)


def submit_guess(session: Session, raw_input: str) -> GuessResult:
    """
    Score one guess against the session's target.

    Raises:
        InvalidStateError: If the session is already WON or LOST
    """
    if not session.is_active:
        raise InvalidStateError(session.status)

    target = session.target
    normalized = target.normalize(raw_input)
    attempts_used = session.attempts_used + 1
    history = session.history + (normalized,)

    logger.debug(
        f"Guess {attempts_used}/{session.attempt_limit}: "
        f"{raw_input!r} -> {normalized!r}"
    )

    if target.matches(normalized):
        new_session = session._copy_with(
            attempts_used=attempts_used,
            status=SessionStatus.WON,
            history=history,
        )
        logger.info(f"Session won after {attempts_used} attempt(s)")
        return GuessResult(session=new_session, outcome=Outcome.won())

    if attempts_used == session.attempt_limit:
        new_session = session._copy_with(
            attempts_used=attempts_used,
            status=SessionStatus.LOST,
            history=history,
        )
        logger.info(f"Session lost, target was {target}")
        return GuessResult(
            session=new_session,
            outcome=Outcome.lost(target.reveal()),
        )

    new_session = session._copy_with(
        attempts_used=attempts_used,
        history=history,
    )
    return GuessResult(
        session=new_session,
        outcome=Outcome.retry(
            session.attempt_limit - attempts_used,
            hint=target.hint_for(normalized),
        ),
    )
