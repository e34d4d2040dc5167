from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.output_format import OutputFormat

"""Config loader.

Responsibilities:
- Locate the optional YAML config (explicit path > RCLI_CONFIG > config/rcli.yml)
- Validate it against config_schema.json
- Apply built-in defaults for every missing key

Command-line flags are merged on top by the CLI.
"""

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/rcli.yml")
CONFIG_ENV_VAR = "RCLI_CONFIG"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class CsvConfig:
    delimiter: str = ","
    header: bool = True
    format: OutputFormat = OutputFormat.JSON
    coerce_numbers: bool = True
    inspect_rows: int = 5


@dataclass(frozen=True)
class GenPassConfig:
    length: int = 16
    uppercase: bool = True
    lowercase: bool = True
    number: bool = True
    symbol: bool = True


@dataclass(frozen=True)
class AppConfig:
    csv: CsvConfig = field(default_factory=CsvConfig)
    genpass: GenPassConfig = field(default_factory=GenPassConfig)
    source: Path | None = None  # None when running on defaults only


def _validate_config_schema(data: Any) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: if the schema file is missing or unreadable, or the data
            violates it (unknown keys, wrong types, out of range values)
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise ConfigError(f"config validation failed at {where}: {e.message}") from e


def resolve_config_path(explicit: Path | None = None) -> tuple[Path | None, bool]:
    """Pick the config file to load.

    Returns:
        (path or None, required) where required is True when the path was
        asked for explicitly (flag or env var) and must therefore exist
    """
    if explicit is not None:
        return explicit, True
    env_value = os.getenv(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value), True
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH, False
    return None, False


def load_config(path: Path | None = None) -> AppConfig:
    """Load and validate the configuration.

    Args:
        path: Explicit config path (``--config``); see resolve_config_path

    Raises:
        ConfigError: missing explicit file, invalid YAML or schema violation
    """
    resolved, required = resolve_config_path(path)
    if resolved is None:
        return AppConfig()
    if not resolved.exists():
        if required:
            raise ConfigError(f"config file not found: {resolved}")
        return AppConfig()
    try:
        data = yaml.safe_load(resolved.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    _validate_config_schema(data)

    csv_raw = data.get("csv", {})
    gen_raw = data.get("genpass", {})
    csv_defaults = CsvConfig()
    gen_defaults = GenPassConfig()
    csv_cfg = CsvConfig(
        delimiter=csv_raw.get("delimiter", csv_defaults.delimiter),
        header=csv_raw.get("header", csv_defaults.header),
        format=OutputFormat.from_name(csv_raw.get("format", csv_defaults.format.value)),
        coerce_numbers=csv_raw.get("coerce_numbers", csv_defaults.coerce_numbers),
        inspect_rows=csv_raw.get("inspect_rows", csv_defaults.inspect_rows),
    )
    gen_cfg = GenPassConfig(
        length=gen_raw.get("length", gen_defaults.length),
        uppercase=gen_raw.get("uppercase", gen_defaults.uppercase),
        lowercase=gen_raw.get("lowercase", gen_defaults.lowercase),
        number=gen_raw.get("number", gen_defaults.number),
        symbol=gen_raw.get("symbol", gen_defaults.symbol),
    )
    return AppConfig(csv=csv_cfg, genpass=gen_cfg, source=resolved)
