from __future__ import annotations

import secrets

from ..models.password import GeneratedPassword, PasswordSpec
from .strength import estimate_strength

"""Password generator.

Algorithm:
1. Validate the PasswordSpec (before any random draw)
2. Reserve one position per enabled class, drawn from that class
3. Fill the remaining positions from the union of enabled classes
4. Shuffle the whole password (uniform Fisher-Yates)
5. Score the result

All randomness comes from the ``secrets`` module (OS CSPRNG).
"""

__all__ = [
    "MAX_LENGTH",
    "SpecError",
    "validate_spec",
    "generate",
]

MAX_LENGTH = 128

_rng = secrets.SystemRandom()


class SpecError(Exception):
    """Raised when a PasswordSpec cannot be satisfied."""


def validate_spec(spec: PasswordSpec) -> None:
    """Raise SpecError if ``spec`` is unsatisfiable."""
    if spec.length < 1:
        raise SpecError(f"password length must be positive, got {spec.length}")
    if spec.length > MAX_LENGTH:
        raise SpecError(f"password length cannot exceed {MAX_LENGTH} characters, got {spec.length}")
    classes = spec.enabled_classes
    if not classes:
        raise SpecError("at least one character class must be enabled")
    if spec.length < len(classes):
        raise SpecError(
            f"password length {spec.length} is too short for {len(classes)} required character classes"
        )


def generate(spec: PasswordSpec) -> GeneratedPassword:
    """Generate a password satisfying ``spec`` and score it.

    Raises:
        SpecError: if the spec is invalid (no randomness is consumed)
    """
    validate_spec(spec)
    classes = spec.enabled_classes
    # class sets are disjoint, so every pool character is equally likely
    pool = "".join(cls.chars for cls in classes)

    chars = [secrets.choice(cls.chars) for cls in classes]
    chars.extend(secrets.choice(pool) for _ in range(spec.length - len(chars)))
    _rng.shuffle(chars)

    password = "".join(chars)
    score, warning, suggestions = estimate_strength(password)
    return GeneratedPassword(password=password, score=score, warning=warning, suggestions=suggestions)
