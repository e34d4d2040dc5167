from __future__ import annotations

from rcli.models import CharClass
from rcli.models.password import SYMBOL_CHARS

"""Character sets are part of the external interface (password policies depend on them)."""


def test_symbol_set_verbatim():
    assert SYMBOL_CHARS == "!@#$%^&*_"


def test_class_sets_verbatim():
    assert CharClass.UPPER.chars == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert CharClass.LOWER.chars == "abcdefghijklmnopqrstuvwxyz"
    assert CharClass.NUMBER.chars == "0123456789"
    assert CharClass.SYMBOL.chars == SYMBOL_CHARS


def test_class_sets_are_disjoint():
    seen: set[str] = set()
    for cls in CharClass:
        assert not seen & set(cls.chars)
        seen |= set(cls.chars)
