from __future__ import annotations
import json
import tomllib
from pathlib import Path

import yaml

from rcli.cli import main as cli_main


def test_csv_default_output_is_output_json(sample_csv: Path, temp_workdir: Path, capsys):
    code = cli_main(["csv", "-i", str(sample_csv)])
    err = capsys.readouterr().err
    assert code == 0
    out_file = temp_workdir / "output.json"
    assert json.loads(out_file.read_text(encoding="utf-8")) == [
        {"name": "Alice", "age": 30},
        {"name": "Bob", "age": 25},
    ]
    assert "SUMMARY input=" in err
    assert "output=output.json format=json rows=2" in err


def test_csv_to_stdout_keeps_logs_off_stdout(sample_csv: Path, capsys):
    code = cli_main(["csv", "-i", str(sample_csv), "-o", "-", "--format", "yaml"])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == "- name: Alice\n  age: 30\n- name: Bob\n  age: 25\n"
    assert "SUMMARY" not in captured.out
    assert "output=- format=yaml" in captured.err


def test_csv_tsv_without_header_to_toml(temp_workdir: Path, capsys):
    src = temp_workdir / "data" / "plain.tsv"
    src.write_text("a\t1\nb\t2\n", encoding="utf-8")
    out = temp_workdir / "out" / "plain.toml"
    code = cli_main(["csv", "-i", str(src), "-o", str(out), "-d", "\\t", "--no-header", "--format", "toml"])
    assert code == 0
    assert tomllib.loads(out.read_text(encoding="utf-8")) == {
        "records": [{"field0": "a", "field1": 1}, {"field0": "b", "field1": 2}]
    }


def test_csv_no_coerce_numbers(sample_csv: Path, capsys):
    code = cli_main(["csv", "-i", str(sample_csv), "-o", "-", "--no-coerce-numbers"])
    assert code == 0
    assert json.loads(capsys.readouterr().out)[0] == {"name": "Alice", "age": "30"}


def test_csv_quoted_multiline_fields_to_yaml(temp_workdir: Path, capsys):
    src = temp_workdir / "notes.csv"
    src.write_text('id,note\n1,"first line\nsecond, line"\n2,"plain"\n', encoding="utf-8")
    code = cli_main(["csv", "-i", str(src), "-o", "notes.yaml", "--format", "yaml"])
    assert code == 0
    data = yaml.safe_load((temp_workdir / "notes.yaml").read_text(encoding="utf-8"))
    assert data == [{"id": 1, "note": "first line\nsecond, line"}, {"id": 2, "note": "plain"}]


def test_csv_config_supplies_defaults_and_flags_override(write_config: Path, sample_csv: Path, temp_workdir: Path, capsys):
    # config says yaml
    assert cli_main(["csv", "-i", str(sample_csv)]) == 0
    assert (temp_workdir / "output.yaml").exists()
    # flag wins over config
    assert cli_main(["csv", "-i", str(sample_csv), "--format", "toml"]) == 0
    assert (temp_workdir / "output.toml").exists()


def test_csv_inspect_prints_preview(write_config: Path, temp_workdir: Path, capsys):
    src = temp_workdir / "many.csv"
    src.write_text("name,age\nAlice,30\nBob,25\nCarol,41\n", encoding="utf-8")
    code = cli_main(["csv", "-i", str(src), "--inspect"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("fields=['name', 'age'] rows=3\n")
    assert "Bob" in out and "Carol" not in out  # inspect_rows: 2 from config
    assert not (temp_workdir / "output.yaml").exists()


def test_csv_debug_logs_parsed_fields(sample_csv: Path, capsys):
    code = cli_main(["--debug", "csv", "-i", str(sample_csv), "-o", "-"])
    err = capsys.readouterr().err
    assert code == 0
    assert "DEBUG debug mode enabled" in err
    assert "fields=['name', 'age'] rows=2" in err


def test_csv_config_from_dotenv(sample_csv: Path, temp_workdir: Path, capsys, monkeypatch):
    alt = temp_workdir / "alt.yml"
    alt.write_text("csv:\n  format: toml\n", encoding="utf-8")
    (temp_workdir / ".env").write_text(f"RCLI_CONFIG={alt}\n", encoding="utf-8")
    # load_dotenv writes to os.environ; let monkeypatch restore it
    monkeypatch.setenv("RCLI_CONFIG", "")
    code = cli_main(["csv", "-i", str(sample_csv)])
    assert code == 0
    assert (temp_workdir / "output.toml").exists()
