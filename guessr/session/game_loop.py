"""
Game Loop - Drives a guessing session from line-based input.

The loop:
1. Print the welcome banner
2. Print the challenge and the prompt
3. Read one line and submit it as a guess
4. Print the outcome
5. Repeat until the game ends or input runs out
"""

from __future__ import annotations
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
import logging

from ..engine_core import Outcome, Session, describe_outcome, submit_guess
from ..games import GamePreset, challenge_line

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """State of the game loop."""
    WAITING_GUESS = "waiting_guess"
    GAME_OVER = "game_over"
    INPUT_CLOSED = "input_closed"  # Input ended before the game did


@dataclass
class LoopResult:
    """Final state of a loop run."""
    session: Session
    loop_state: LoopState
    outcomes: list[Outcome] = field(default_factory=list)


class GameLoop:
    """
    The host driver for one session.

    Usage:
        loop = GameLoop(session, COLOR_GAME, output=print)
        result = loop.run(sys.stdin)

    `output` receives each display line; `prompt` receives prompt text
    that should be shown without a trailing newline.
    """

    def __init__(
        self,
        session: Session,
        preset: GamePreset,
        output: Callable[[str], None],
        prompt: Callable[[str], None] | None = None,
    ):
        self.session = session
        self.preset = preset
        self.output = output
        self.prompt = prompt
        self.state = LoopState.WAITING_GUESS
        self.outcomes: list[Outcome] = []

    def run(self, lines: Iterable[str]) -> LoopResult:
        """Consume lines until the session ends or input is exhausted."""
        self.output(self.preset.welcome)
        self._ask()

        for line in lines:
            outcome = self.process_line(line.rstrip("\r\n"))
            if outcome.is_terminal:
                break
            self._ask()
        else:
            if self.session.is_active:
                logger.info(
                    f"Input closed after {self.session.attempts_used} "
                    f"of {self.session.attempt_limit} attempt(s)"
                )
                self.state = LoopState.INPUT_CLOSED

        return LoopResult(
            session=self.session,
            loop_state=self.state,
            outcomes=list(self.outcomes),
        )

    def process_line(self, line: str) -> Outcome:
        """Submit a single line as a guess and print the outcome."""
        result = submit_guess(self.session, line)
        self.session = result.session
        self.outcomes.append(result.outcome)

        for text in describe_outcome(result.outcome, self.preset).splitlines():
            self.output(text)

        if result.outcome.is_terminal:
            self.state = LoopState.GAME_OVER
        return result.outcome

    def _ask(self):
        self.output(challenge_line(self.preset, self.session.attempt_limit))
        if self.prompt:
            self.prompt(self.preset.prompt)
