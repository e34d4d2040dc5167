from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

"""Password generation models.

The character set carried by each CharClass is an external commitment: test
vectors and downstream password policies rely on it.
"""

__all__ = [
    "UPPER_CHARS",
    "LOWER_CHARS",
    "NUMBER_CHARS",
    "SYMBOL_CHARS",
    "CharClass",
    "PasswordSpec",
    "GeneratedPassword",
]

UPPER_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER_CHARS = "abcdefghijklmnopqrstuvwxyz"
NUMBER_CHARS = "0123456789"
SYMBOL_CHARS = "!@#$%^&*_"


class CharClass(Enum):
    """Character classes that a password can be required to contain."""
    UPPER = "upper"
    LOWER = "lower"
    NUMBER = "number"
    SYMBOL = "symbol"

    @property
    def chars(self) -> str:
        return _CLASS_CHARS[self]


_CLASS_CHARS = {
    CharClass.UPPER: UPPER_CHARS,
    CharClass.LOWER: LOWER_CHARS,
    CharClass.NUMBER: NUMBER_CHARS,
    CharClass.SYMBOL: SYMBOL_CHARS,
}


@dataclass(frozen=True)
class PasswordSpec:
    """Requested password length and enabled character classes."""
    length: int
    uppercase: bool = True
    lowercase: bool = True
    number: bool = True
    symbol: bool = True

    @property
    def enabled_classes(self) -> list[CharClass]:
        """Enabled classes in fixed order: upper, lower, number, symbol."""
        flags = [
            (CharClass.UPPER, self.uppercase),
            (CharClass.LOWER, self.lowercase),
            (CharClass.NUMBER, self.number),
            (CharClass.SYMBOL, self.symbol),
        ]
        return [cls for cls, enabled in flags if enabled]


@dataclass(frozen=True)
class GeneratedPassword:
    """Generated password plus the estimator's verdict.

    Attributes:
        password: The generated string (len == requested length)
        score: Strength score 0 (weakest) .. 4 (strongest)
        warning: Estimator warning, None when it has nothing to say
        suggestions: Estimator suggestions, possibly empty
    """
    password: str
    score: int
    warning: str | None = None
    suggestions: list[str] = field(default_factory=list)

    def __repr__(self) -> str:  # password masked
        return f"GeneratedPassword(length={len(self.password)}, score={self.score})"
