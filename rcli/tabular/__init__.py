"""Delimited-text parsing and structured document serialization."""

from .reader import ParseError, deserialize, parse
from .writer import TOML_RECORDS_KEY, SerializeError, serialize

__all__ = [
    "ParseError",
    "SerializeError",
    "TOML_RECORDS_KEY",
    "deserialize",
    "parse",
    "serialize",
]
