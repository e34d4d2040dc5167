from __future__ import annotations

import json

import tomli_w
import yaml

from ..models.output_format import OutputFormat
from ..models.record_set import RecordSet

"""Structured document writer.

Document shapes (stable, consumers depend on them):

- JSON: ``[{"name": "Alice", "age": 30}, ...]``
- YAML: block sequence of mappings, keys in field order
- TOML: ``[[records]]`` array of tables, one table per record

TOML has no top-level arrays, so records are wrapped under TOML_RECORDS_KEY.
"""

__all__ = [
    "TOML_RECORDS_KEY",
    "SerializeError",
    "serialize",
]

TOML_RECORDS_KEY = "records"


class SerializeError(Exception):
    """Raised when a parsed value cannot be represented in the target format.

    Attributes:
        row: 1-based record index of the offending value, if known
        field: field name of the offending value, if known
    """

    def __init__(self, message: str, row: int | None = None, field: str | None = None) -> None:
        self.row = row
        self.field = field
        if row is not None and field is not None:
            message = f"record {row}, field '{field}': {message}"
        super().__init__(message)


def _check_encodable(record_set: RecordSet) -> None:
    """Reject text that has no UTF-8 encoding (e.g. lone surrogates)."""
    for index, record in enumerate(record_set.records, start=1):
        for key, value in record.items():
            for text in (key, value):
                if not isinstance(text, str):
                    continue
                try:
                    text.encode("utf-8")
                except UnicodeEncodeError as e:
                    raise SerializeError(
                        f"not representable as UTF-8 text ({e.reason} at position {e.start})",
                        row=index,
                        field=key,
                    ) from e


def _to_json(record_set: RecordSet) -> str:
    return json.dumps(record_set.records, indent=2, ensure_ascii=False) + "\n"


class _RecordDumper(yaml.SafeDumper):
    pass


# plain and single-quoted scalars do not preserve these on load
_YAML_LINE_BREAKS = ("\x85", "\u2028", "\u2029", "\ufeff")


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if any(ch in data for ch in _YAML_LINE_BREAKS):
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style='"')
    return dumper.represent_str(data)


_RecordDumper.add_representer(str, _represent_str)


def _to_yaml(record_set: RecordSet) -> str:
    return yaml.dump(
        record_set.records,
        Dumper=_RecordDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def _to_toml(record_set: RecordSet) -> str:
    if not record_set.records:
        return tomli_w.dumps({TOML_RECORDS_KEY: []})
    # one [[records]] header per record; tomli_w would inline short tables
    chunks = []
    for index, record in enumerate(record_set.records, start=1):
        try:
            body = tomli_w.dumps(record)
        except (TypeError, ValueError) as e:
            raise SerializeError(f"toml writer rejected record {index}: {e}", row=index) from e
        chunks.append(f"[[{TOML_RECORDS_KEY}]]\n{body}")
    return "\n".join(chunks)


_WRITERS = {
    OutputFormat.JSON: _to_json,
    OutputFormat.YAML: _to_yaml,
    OutputFormat.TOML: _to_toml,
}


def serialize(record_set: RecordSet, fmt: OutputFormat) -> str:
    """Render a RecordSet as a document in ``fmt``.

    Key order follows ``record_set.fields`` and item order follows the records.

    Raises:
        SerializeError: when a field name or value cannot be represented
    """
    _check_encodable(record_set)
    return _WRITERS[fmt](record_set)
