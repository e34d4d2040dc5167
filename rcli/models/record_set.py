from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

"""RecordSet model for the record transcoder.

A RecordSet is the ordered result of parsing one delimited-text input. Each
record is a plain dict whose keys are the header field names in header order;
dict insertion order carries the field order through every serializer.
"""

__all__ = [
    "Record",
    "RecordSet",
]

Record = dict[str, Union[str, int]]


@dataclass(frozen=True)
class RecordSet:
    """Ordered sequence of records sharing one field list.

    Attributes:
        fields: Field names in header order
        records: Records in source row order; each has exactly ``fields`` as keys
    """
    fields: list[str]
    records: list[Record] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)
