from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import AppConfig, ConfigError, load_config
from ..logging.init import log_summary, set_debug, setup_logging
from ..models.output_format import OutputFormat
from ..models.password import PasswordSpec
from ..passwords.generator import SpecError, generate
from ..passwords.strength import describe_score
from ..services.inspect import render_preview
from ..services.summary import render_genpass_summary, render_transcode_summary
from ..services.transcode import default_output_path, load_records, transcode
from ..tabular.reader import ParseError
from ..tabular.writer import SerializeError

"""CLI entrypoint.

Subcommands:
- csv: convert a delimited file to JSON / YAML / TOML, or preview it
- genpass: generate a password and report its strength

Flag values override the config file, which overrides built-in defaults.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_INVALID_INPUT = 2

STDOUT_MARKER = "-"


def _delimiter(value: str) -> str:
    if value == "\\t":
        return "\t"
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"delimiter must be a single character, got {value!r}")
    if value in ('"', "\n", "\r"):
        raise argparse.ArgumentTypeError(f"delimiter cannot be {value!r}")
    return value


def _output_format(value: str) -> OutputFormat:
    try:
        return OutputFormat.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="rcli", description="CSV converter and password generator")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--config", type=Path, default=None, help="YAML config file (default: config/rcli.yml)")
    sub = p.add_subparsers(dest="command", required=True)

    c = sub.add_parser("csv", help="Show CSV or convert to other formats")
    c.add_argument("-i", "--input", type=Path, required=True, help="Delimited input file")
    c.add_argument("-o", "--output", default=None, help="Output file, '-' for stdout (default: output.<format>)")
    c.add_argument("-d", "--delimiter", type=_delimiter, default=None, help="Field delimiter (default: ',')")
    c.add_argument("--header", action=argparse.BooleanOptionalAction, default=None,
                   help="First row is a header row (default: true)")
    c.add_argument("--format", type=_output_format, default=None, help="json, yaml or toml (default: json)")
    c.add_argument("--coerce-numbers", action=argparse.BooleanOptionalAction, default=None,
                   help="Emit integer-looking values as numbers (default: true)")
    c.add_argument("--inspect", action="store_true", help="Print header & first rows then exit")

    g = sub.add_parser("genpass", help="Generate a random password")
    g.add_argument("-l", "--length", type=int, default=None, help="Password length (default: 16)")
    for name, label in (
        ("uppercase", "uppercase letters"),
        ("lowercase", "lowercase letters"),
        ("number", "digits"),
        ("symbol", "symbols"),
    ):
        g.add_argument(f"--{name}", action=argparse.BooleanOptionalAction, default=None,
                       help=f"Include {label} (default: true)")
    return p.parse_args(argv)


def _pick(flag, configured):
    return configured if flag is None else flag


def _run_csv(args: argparse.Namespace, cfg: AppConfig, logger) -> int:
    csv_cfg = cfg.csv
    delimiter = _pick(args.delimiter, csv_cfg.delimiter)
    has_header = _pick(args.header, csv_cfg.header)
    fmt = _pick(args.format, csv_cfg.format)
    coerce_numbers = _pick(args.coerce_numbers, csv_cfg.coerce_numbers)

    try:
        if args.inspect:
            record_set = load_records(args.input, delimiter, has_header, coerce_numbers)
            sys.stdout.write(render_preview(record_set, csv_cfg.inspect_rows))
            return EXIT_SUCCESS

        if args.output == STDOUT_MARKER:
            output_path = None
        elif args.output is None:
            output_path = default_output_path(fmt)
        else:
            output_path = Path(args.output)
        result = transcode(
            args.input,
            output_path,
            fmt,
            delimiter=delimiter,
            has_header=has_header,
            coerce_numbers=coerce_numbers,
        )
    except ParseError as e:
        logger.error(f"parse: {args.input}: {e}")
        return EXIT_INVALID_INPUT
    except SerializeError as e:
        logger.error(f"serialize: {e}")
        return EXIT_INVALID_INPUT
    except OSError as e:
        logger.error(f"io: {e}")
        return EXIT_FATAL

    log_summary(render_transcode_summary(result))
    return EXIT_SUCCESS


def _run_genpass(args: argparse.Namespace, cfg: AppConfig, logger) -> int:
    gen_cfg = cfg.genpass
    spec = PasswordSpec(
        length=_pick(args.length, gen_cfg.length),
        uppercase=_pick(args.uppercase, gen_cfg.uppercase),
        lowercase=_pick(args.lowercase, gen_cfg.lowercase),
        number=_pick(args.number, gen_cfg.number),
        symbol=_pick(args.symbol, gen_cfg.symbol),
    )
    try:
        generated = generate(spec)
    except SpecError as e:
        logger.error(f"genpass: {e}")
        return EXIT_INVALID_INPUT

    print(generated.password)
    logger.info(f"Password strength: {generated.score}")
    logger.info(describe_score(generated.score))
    if generated.warning:
        logger.warning(generated.warning)
    for suggestion in generated.suggestions:
        logger.info(f"suggestion: {suggestion}")
    log_summary(render_genpass_summary(spec, generated))
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # only read sys.argv when no list was passed ([] must stay [])
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    # .env may set RCLI_CONFIG
    env_file = Path(".env")
    if env_file.exists():
        load_dotenv(dotenv_path=env_file, override=True)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    if cfg.source is not None:
        logger.debug(f"config loaded from {cfg.source}")

    if args.command == "csv":
        return _run_csv(args, cfg, logger)
    return _run_genpass(args, cfg, logger)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
