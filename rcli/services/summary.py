from __future__ import annotations

from ..models.password import GeneratedPassword, PasswordSpec
from .transcode import TranscodeResult

"""SUMMARY line rendering.

Formats (``SUMMARY`` prefix is added by log_summary):
    input={path} output={path|-} format={fmt} rows={n} elapsed_sec={s}
    length={n} classes={k} score={0-4}
"""


def _format_seconds(seconds: float) -> str:
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        # avoid scientific notation
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


def render_transcode_summary(result: TranscodeResult) -> str:
    """Render the conversion summary.

    Examples:
        >>> from pathlib import Path
        >>> from rcli.models import OutputFormat
        >>> r = TranscodeResult(Path("in.csv"), None, OutputFormat.JSON, rows=2, elapsed_seconds=0.5)
        >>> render_transcode_summary(r)
        'input=in.csv output=- format=json rows=2 elapsed_sec=0.5'
    """
    output = "-" if result.output_path is None else str(result.output_path)
    return (
        f"input={result.input_path} "
        f"output={output} "
        f"format={result.format.value} "
        f"rows={result.rows} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )


def render_genpass_summary(spec: PasswordSpec, generated: GeneratedPassword) -> str:
    return f"length={len(generated.password)} classes={len(spec.enabled_classes)} score={generated.score}"
