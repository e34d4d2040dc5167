from __future__ import annotations

from enum import Enum

"""OutputFormat enum for the record transcoder.

The three variants and the document shape each one produces are part of the
external contract:

- JSON: top-level array of flat objects
- YAML: top-level sequence of flat mappings
- TOML: array of tables under the ``records`` key
"""

__all__ = [
    "OutputFormat",
]


class OutputFormat(Enum):
    """Serialization target for a converted RecordSet."""
    JSON = "json"
    YAML = "yaml"
    TOML = "toml"

    @property
    def extension(self) -> str:
        """File extension used for default output names (without the dot)."""
        return self.value

    @classmethod
    def from_name(cls, name: str) -> OutputFormat:
        """Resolve a case-insensitive format name.

        Raises:
            ValueError: if the name is not one of json, yaml, toml
        """
        key = name.strip().lower()
        if key == "yml":
            key = "yaml"
        for member in cls:
            if member.value == key:
                return member
        allowed = ", ".join(m.value for m in cls)
        raise ValueError(f"unsupported output format '{name}' (expected one of: {allowed})")
