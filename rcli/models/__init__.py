"""Domain models for the rcli tool.

Record-side models describe parsed tabular input and the closed set of output
formats; password-side models describe a generation request and its result.
"""

from .output_format import OutputFormat
from .password import CharClass, GeneratedPassword, PasswordSpec
from .record_set import Record, RecordSet

__all__ = [
    # Transcoding models
    "OutputFormat",
    "Record",
    "RecordSet",
    # Password models
    "CharClass",
    "GeneratedPassword",
    "PasswordSpec",
]
