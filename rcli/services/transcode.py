from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from ..models.output_format import OutputFormat
from ..models.record_set import RecordSet
from ..tabular.reader import ParseError, parse
from ..tabular.writer import serialize

logger = logging.getLogger(__name__)

"""Transcoding service: delimited file -> JSON / YAML / TOML document.

The whole input is read before parsing starts; nothing is written unless both
parsing and serialization succeeded.
"""


@dataclass(frozen=True)
class TranscodeResult:
    input_path: Path
    output_path: Path | None  # None -> stdout
    format: OutputFormat
    rows: int
    elapsed_seconds: float


def default_output_path(fmt: OutputFormat) -> Path:
    """Output path used when none is given: ``output.<ext>`` in the cwd."""
    return Path(f"output.{fmt.extension}")


def read_input(path: Path) -> str:
    """Read a delimited text file as UTF-8 (a leading BOM is dropped).

    Raises:
        ParseError: if the file is not valid UTF-8
        OSError: if the file cannot be read
    """
    data = path.read_bytes()
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"{path}: input is not valid UTF-8 (byte offset {e.start})") from e


def load_records(
    input_path: Path,
    delimiter: str = ",",
    has_header: bool = True,
    coerce_numbers: bool = True,
) -> RecordSet:
    text = read_input(input_path)
    record_set = parse(text, delimiter=delimiter, has_header=has_header, coerce_numbers=coerce_numbers)
    logger.debug(f"parsed {input_path}: fields={record_set.fields} rows={len(record_set)}")
    return record_set


def transcode(
    input_path: Path,
    output_path: Path | None,
    fmt: OutputFormat,
    delimiter: str = ",",
    has_header: bool = True,
    coerce_numbers: bool = True,
    stdout: TextIO | None = None,
) -> TranscodeResult:
    """Convert ``input_path`` into a ``fmt`` document.

    Args:
        input_path: Delimited text file
        output_path: Destination file, None to write to ``stdout``
        fmt: Target format
        delimiter: Field separator
        has_header: Whether the first row holds field names
        coerce_numbers: Emit canonical integers as numbers
        stdout: Stream used when output_path is None (default sys.stdout)

    Raises:
        ParseError: malformed input
        SerializeError: value not representable in ``fmt``
        OSError: input unreadable or output unwritable
    """
    start = time.perf_counter()
    record_set = load_records(input_path, delimiter, has_header, coerce_numbers)
    document = serialize(record_set, fmt)

    if output_path is None:
        stream = stdout if stdout is not None else sys.stdout
        stream.write(document)
        stream.flush()
    else:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document, encoding="utf-8")
    elapsed = time.perf_counter() - start

    logger.info(f"converted {len(record_set)} rows from {input_path} to {fmt.value}")
    return TranscodeResult(
        input_path=input_path,
        output_path=output_path,
        format=fmt,
        rows=len(record_set),
        elapsed_seconds=elapsed,
    )
