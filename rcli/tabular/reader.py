from __future__ import annotations

import csv
import io
import json
import re
import tomllib
from typing import Any

import yaml

from ..models.output_format import OutputFormat
from ..models.record_set import Record, RecordSet
from .writer import TOML_RECORDS_KEY

"""Delimited-text reader.

- First row is the header unless ``has_header`` is False, in which case fields
  are named field0, field1, ...
- Every data row must have exactly as many fields as the header.
- Quoting follows RFC 4180 and is parsed strictly: an unterminated quote or
  text after a closing quote is an error, never repaired.
- Integer-looking values become ``int`` when they survive a textual round trip
  and fit in a signed 64-bit integer (the TOML limit). The same values are used
  for every output format.

``deserialize`` is the inverse of ``writer.serialize``.
"""

__all__ = [
    "ParseError",
    "parse",
    "deserialize",
]

_INT_RE = re.compile(r"0|-?[1-9][0-9]*")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ParseError(Exception):
    """Raised when input cannot be turned into a RecordSet.

    Attributes:
        row: 1-based row number (header row = 1), None when not row specific
        line: physical line number where the problem was detected, if known
    """

    def __init__(self, message: str, row: int | None = None, line: int | None = None) -> None:
        self.row = row
        self.line = line
        location = []
        if row is not None:
            location.append(f"row {row}")
        if line is not None:
            location.append(f"line {line}")
        if location:
            message = f"{', '.join(location)}: {message}"
        super().__init__(message)


def _check_delimiter(delimiter: str) -> None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    if delimiter in ('"', "\r", "\n"):
        raise ValueError(f"delimiter cannot be {delimiter!r}")


def coerce_value(value: str) -> str | int:
    """Return ``value`` as int when it is a canonical 64-bit integer, else unchanged."""
    if _INT_RE.fullmatch(value):
        number = int(value)
        if _INT64_MIN <= number <= _INT64_MAX:
            return number
    return value


def parse(
    input_text: str,
    delimiter: str = ",",
    has_header: bool = True,
    coerce_numbers: bool = True,
) -> RecordSet:
    """Parse delimited text into a RecordSet.

    Args:
        input_text: Whole input, already decoded
        delimiter: Single field separator character
        has_header: Whether the first row holds field names
        coerce_numbers: Convert canonical integers to ``int``

    Raises:
        ParseError: on field count mismatch, malformed quoting, missing header
            or duplicated header names
        ValueError: on an unusable delimiter
    """
    _check_delimiter(delimiter)
    reader = csv.reader(io.StringIO(input_text, newline=""), delimiter=delimiter, strict=True)

    fields: list[str] | None = None
    records: list[Record] = []
    row_number = 0
    while True:
        try:
            raw = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            raise ParseError(f"malformed quoting: {e}", row=row_number + 1, line=reader.line_num) from e
        # blank line
        if not raw:
            continue
        row_number += 1

        if fields is None:
            if has_header:
                fields = raw
                duplicates = sorted({f for f in fields if fields.count(f) > 1})
                if duplicates:
                    raise ParseError(
                        f"duplicate header field(s): {duplicates}", row=row_number, line=reader.line_num
                    )
                continue
            fields = [f"field{i}" for i in range(len(raw))]

        if len(raw) != len(fields):
            raise ParseError(
                f"expected {len(fields)} fields, found {len(raw)}", row=row_number, line=reader.line_num
            )
        if coerce_numbers:
            records.append({k: coerce_value(v) for k, v in zip(fields, raw)})
        else:
            records.append(dict(zip(fields, raw)))

    if fields is None:
        if has_header:
            raise ParseError("input has no header row")
        fields = []
    return RecordSet(fields=fields, records=records)


def _load_document(document: str, fmt: OutputFormat) -> Any:
    try:
        if fmt is OutputFormat.JSON:
            return json.loads(document)
        if fmt is OutputFormat.YAML:
            return yaml.safe_load(document)
        data = tomllib.loads(document)
    except (json.JSONDecodeError, yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise ParseError(f"invalid {fmt.value} document: {e}") from e
    if not isinstance(data, dict) or TOML_RECORDS_KEY not in data:
        raise ParseError(f"toml document lacks '{TOML_RECORDS_KEY}' array of tables")
    return data[TOML_RECORDS_KEY]


def deserialize(document: str, fmt: OutputFormat) -> RecordSet:
    """Read a document produced by ``serialize`` back into a RecordSet.

    Field names come from the first item, so a document with no items yields
    ``fields=[]``: none of the formats carries a header without records.

    Raises:
        ParseError: if the document is not a sequence of flat mappings sharing
            the same keys in the same order
    """
    items = _load_document(document, fmt)
    # yaml.safe_load("") -> None
    if items is None:
        items = []
    if not isinstance(items, list):
        raise ParseError(f"{fmt.value} document is not a top-level sequence")

    fields: list[str] = []
    records: list[Record] = []
    for index, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            raise ParseError(f"item is not a mapping ({type(item).__name__})", row=index)
        keys = [str(k) for k in item.keys()]
        if index == 1:
            fields = keys
        elif keys != fields:
            raise ParseError(f"fields {keys} differ from {fields}", row=index)
        record: Record = {}
        for key, value in zip(keys, item.values()):
            if isinstance(value, (dict, list)):
                raise ParseError(f"field '{key}' is not a scalar", row=index)
            record[key] = value
        records.append(record)
    return RecordSet(fields=fields, records=records)
