"""
Guessr CLI - Command-line interface for the guessing games.

Usage:
    guessr color [--color C] [--attempts N]                Guess my favorite color
    guessr number [--min A] [--max B] [--attempts N] [--seed S]
                                                           Guess the secret number

Exit codes: 0 won, 1 lost or input closed, 2 configuration error.
"""

import argparse
import logging
import sys

EXIT_WON = 0
EXIT_NOT_WON = 1
EXIT_CONFIG_ERROR = 2


def build_parser():
    parser = argparse.ArgumentParser(
        description="Guessr - Interactive guessing games",
        prog="guessr",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log debug output to stderr"
    )
    subparsers = parser.add_subparsers(dest="command", help="Games")

    # Color game
    color_parser = subparsers.add_parser("color", help="Guess my favorite color")
    color_parser.add_argument("--color", help="Favorite color (default: blue)")
    color_parser.add_argument("--attempts", type=int, help="Number of guesses allowed")

    # Number game
    number_parser = subparsers.add_parser("number", help="Guess the secret number")
    number_parser.add_argument("--min", dest="minimum", type=int, help="Lowest possible number")
    number_parser.add_argument("--max", dest="maximum", type=int, help="Highest possible number")
    number_parser.add_argument("--attempts", type=int, help="Number of guesses allowed")
    number_parser.add_argument("--seed", type=int, help="Seed for the secret number")

    return parser


def main(argv=None, stdin=None, stdout=None):
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "color":
        overrides = {"color": args.color, "attempts": args.attempts}
    elif args.command == "number":
        overrides = {
            "minimum": args.minimum,
            "maximum": args.maximum,
            "attempts": args.attempts,
            "seed": args.seed,
        }
    else:
        parser.print_help()
        return EXIT_CONFIG_ERROR

    if stdin is None:
        stdin = sys.stdin
        # Undecodable bytes become U+FFFD and are scored as wrong guesses
        if hasattr(stdin, "reconfigure"):
            stdin.reconfigure(errors="replace")

    return cmd_play(args.command, overrides, stdin, stdout or sys.stdout)


def cmd_play(game, overrides, stdin, stdout):
    """Play one game, reading guesses from stdin."""
    from .config import load_config
    from .engine_core import ConfigurationError, SessionStatus
    from .games import get_preset
    from .session import GameLoop

    try:
        preset = get_preset(game)
        config = load_config(game, **overrides)
        session = config.build_session()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    def output(text):
        print(text, file=stdout, flush=True)

    def prompt(text):
        print(text, end="", file=stdout, flush=True)

    loop = GameLoop(session, preset, output=output, prompt=prompt)
    result = loop.run(stdin)

    if result.session.status is SessionStatus.WON:
        return EXIT_WON
    return EXIT_NOT_WON


if __name__ == "__main__":
    sys.exit(main())
