from __future__ import annotations

from zxcvbn import zxcvbn

"""Password strength estimation backed by zxcvbn."""

__all__ = [
    "ESTIMATOR_MAX_INPUT",
    "estimate_strength",
    "describe_score",
]

# zxcvbn only sees this many leading characters
ESTIMATOR_MAX_INPUT = 72


def estimate_strength(password: str) -> tuple[int, str | None, list[str]]:
    """Score ``password`` with zxcvbn.

    Returns:
        (score 0-4, warning or None, list of suggestions)
    """
    result = zxcvbn(password[:ESTIMATOR_MAX_INPUT])
    feedback = result.get("feedback") or {}
    warning = feedback.get("warning") or None
    suggestions = list(feedback.get("suggestions") or [])
    return int(result["score"]), warning, suggestions


def describe_score(score: int) -> str:
    if score <= 1:
        return "Weak password - consider adding more characters or complexity"
    if score <= 3:
        return "Moderate password strength"
    return "Strong password"
