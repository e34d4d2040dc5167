from __future__ import annotations
from pathlib import Path

from rcli.cli import main as cli_main
from rcli.models.password import LOWER_CHARS, NUMBER_CHARS, SYMBOL_CHARS, UPPER_CHARS


def test_genpass_defaults(temp_workdir: Path, capsys):
    code = cli_main(["genpass"])
    captured = capsys.readouterr()
    assert code == 0
    password = captured.out.strip()
    assert len(password) == 16
    assert set(password) <= set(UPPER_CHARS + LOWER_CHARS + NUMBER_CHARS + SYMBOL_CHARS)
    assert "INFO Password strength:" in captured.err
    assert "SUMMARY length=16 classes=4 score=" in captured.err
    assert password not in captured.err


def test_genpass_flags(temp_workdir: Path, capsys):
    code = cli_main(["genpass", "-l", "12", "--no-uppercase", "--no-lowercase", "--no-symbol"])
    password = capsys.readouterr().out.strip()
    assert code == 0
    assert len(password) == 12
    assert set(password) <= set(NUMBER_CHARS)


def test_genpass_config_defaults(write_config: Path, capsys):
    code = cli_main(["genpass"])
    captured = capsys.readouterr()
    password = captured.out.strip()
    assert code == 0
    assert len(password) == 20
    assert not set(password) & set(SYMBOL_CHARS)
    # flag re-enables what config disabled
    assert cli_main(["genpass", "--symbol", "-l", "8"]) == 0
    assert set(capsys.readouterr().out.strip()) & set(SYMBOL_CHARS)


def test_genpass_all_classes_disabled(temp_workdir: Path, capsys):
    code = cli_main(["genpass", "--no-uppercase", "--no-lowercase", "--no-number", "--no-symbol"])
    assert code == 2
    assert "at least one character class" in capsys.readouterr().err
