"""
Targets - The hidden value a player is trying to guess.

Two kinds of target exist:
- StringTarget: a literal word (e.g. a color), matched case-insensitively
- NumericTarget: an integer drawn from a closed range [minimum, maximum]

Targets are immutable once created. Each target knows how to normalize
raw input into a comparable value; input that cannot be normalized becomes
None, which never matches.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any
import random
import re

from .errors import ConfigurationError


class Hint(Enum):
    """Direction hint for numeric guesses."""
    HIGHER = "higher"  # Target is above the guess
    LOWER = "lower"  # Target is below the guess


@dataclass(frozen=True)
class StringTarget:
    """A word target, compared after trimming and case folding."""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ConfigurationError(["target must be a non-empty string"])

    def normalize(self, raw_input: str) -> str:
        return raw_input.strip().casefold()

    def matches(self, normalized: Any) -> bool:
        return normalized == self.value.strip().casefold()

    def hint_for(self, normalized: Any) -> Hint | None:
        return None

    def reveal(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumericTarget:
    """
    An integer target inside a closed range.

    Use NumericTarget.draw() to pick the value uniformly at random.
    """
    value: int
    minimum: int
    maximum: int

    def __post_init__(self):
        errors = _range_errors(self.minimum, self.maximum)
        if not _is_int(self.value):
            raise ConfigurationError(["value must be an integer"])
        if not errors and not (self.minimum <= self.value <= self.maximum):
            errors.append(
                f"target {self.value} is outside the range "
                f"[{self.minimum}, {self.maximum}]"
            )
        if errors:
            raise ConfigurationError(errors)

    @classmethod
    def draw(
        cls,
        minimum: int,
        maximum: int,
        rng: random.Random | None = None,
    ) -> NumericTarget:
        """Draw a target uniformly from [minimum, maximum], both inclusive."""
        errors = _range_errors(minimum, maximum)
        if errors:
            raise ConfigurationError(errors)
        rng = rng or random.Random()
        return cls(value=rng.randint(minimum, maximum), minimum=minimum, maximum=maximum)

    def normalize(self, raw_input: str) -> int | None:
        text = raw_input.strip()
        if not _INTEGER_RE.fullmatch(text):
            return None
        return int(text)

    def matches(self, normalized: Any) -> bool:
        return normalized is not None and normalized == self.value

    def hint_for(self, normalized: Any) -> Hint | None:
        if normalized is None or normalized == self.value:
            return None
        return Hint.HIGHER if normalized < self.value else Hint.LOWER

    def reveal(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


Target = StringTarget | NumericTarget

# Optional sign followed by ASCII digits only
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _range_errors(minimum: int, maximum: int) -> list[str]:
    errors = [
        f"{name} must be an integer"
        for name, value in (("min", minimum), ("max", maximum))
        if not _is_int(value)
    ]
    if errors:
        raise ConfigurationError(errors)
    if minimum > maximum:
        errors.append(f"invalid range: min ({minimum}) > max ({maximum})")
    return errors
