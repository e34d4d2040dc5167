"""Constrained random password generation and strength estimation."""

from .generator import MAX_LENGTH, SpecError, generate, validate_spec
from .strength import describe_score, estimate_strength

__all__ = [
    "MAX_LENGTH",
    "SpecError",
    "describe_score",
    "estimate_strength",
    "generate",
    "validate_spec",
]
