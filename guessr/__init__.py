"""
Guessr - Interactive guessing games

Bounded-attempt guessing sessions driven by line-based input:
- Guess my favorite color (case-insensitive word match)
- Guess the secret number (integer drawn from a closed range)

The engine scores guesses; the game loop and CLI handle input and output.
"""

__version__ = "0.1.0"
