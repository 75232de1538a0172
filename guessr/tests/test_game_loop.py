"""
Tests for the game loop driver.

Tests:
- Output lines for a full game
- Stopping on a terminal outcome
- End of input before the game ends
"""

from ..engine_core import OutcomeKind, SessionStatus
from ..games import COLOR_GAME, NUMBER_GAME
from ..session import GameLoop, LoopState


def run_loop(session, preset, lines):
    output: list[str] = []
    prompts: list[str] = []
    loop = GameLoop(session, preset, output=output.append, prompt=prompts.append)
    return loop.run(lines), output, prompts


class TestGameLoop:
    """Tests for GameLoop.run()."""

    def test_color_game_win(self, color_session):
        """Plays until the right color is guessed."""
        result, output, prompts = run_loop(
            color_session, COLOR_GAME, ["red\n", "green\n", "blue\n"]
        )

        assert result.loop_state is LoopState.GAME_OVER
        assert result.session.status is SessionStatus.WON
        assert [o.kind for o in result.outcomes] == [
            OutcomeKind.RETRY,
            OutcomeKind.RETRY,
            OutcomeKind.WON,
        ]
        assert output[0] == "Welcome to the Favorite Color Guessing Game!"
        assert output[1] == "Can you guess my favorite color in less than 10 guesses?"
        assert "9 left" in output
        assert "8 left" in output
        assert output[-1] == "Congratulations! You guessed it right!"
        assert prompts == ["Guess my favorite color: "] * 3

    def test_number_game_loss(self, number_session):
        """Reveals the secret number after the last wrong guess."""
        result, output, _ = run_loop(number_session, NUMBER_GAME, ["1", "2", "3"])

        assert result.loop_state is LoopState.GAME_OVER
        assert result.session.status is SessionStatus.LOST
        assert output[-1] == "Sorry, you ran out of attempts. The secret number is 7."

    def test_stops_reading_after_game_over(self, color_session):
        """Lines after the winning guess are not consumed."""
        lines = iter(["blue", "red", "green"])
        result, _, _ = run_loop(color_session, COLOR_GAME, lines)

        assert len(result.outcomes) == 1
        assert list(lines) == ["red", "green"]

    def test_input_closed(self, color_session):
        """Running out of input leaves the session in progress."""
        result, output, _ = run_loop(color_session, COLOR_GAME, ["red"])

        assert result.loop_state is LoopState.INPUT_CLOSED
        assert result.session.status is SessionStatus.IN_PROGRESS
        assert result.session.attempts_used == 1

    def test_empty_input(self, color_session):
        """No input at all still prints the banner."""
        result, output, _ = run_loop(color_session, COLOR_GAME, [])

        assert result.loop_state is LoopState.INPUT_CLOSED
        assert result.outcomes == []
        assert output[0] == COLOR_GAME.welcome

    def test_without_prompt_callback(self, color_session):
        """The prompt callback is optional."""
        output: list[str] = []
        loop = GameLoop(color_session, COLOR_GAME, output=output.append)
        result = loop.run(["blue"])

        assert result.session.status is SessionStatus.WON
