"""
Errors raised by the guessing engine.

Malformed guess text is never an error: it is scored as an incorrect guess.
Errors here signal bad configuration or misuse by the caller.
"""

from __future__ import annotations


class GuessrError(Exception):
    """Base class for all guessr errors."""


class ConfigurationError(GuessrError):
    """Raised when a session or game is configured with invalid values."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(
            f"Invalid configuration: {'; '.join(errors)}"
            if errors
            else "Invalid configuration"
        )


class InvalidStateError(GuessrError):
    """Raised when a guess is submitted to a session that has already ended."""

    def __init__(self, status):
        self.status = status
        super().__init__(
            f"Cannot submit a guess to a session with status '{status.value}'"
        )
