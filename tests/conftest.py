# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

from rcli.logging.init import reset_logging


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    # config path must come from the test, never from the developer's shell
    monkeypatch.delenv("RCLI_CONFIG", raising=False)
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_csv_text() -> str:
    return "name,age\nAlice,30\nBob,25\n"


@pytest.fixture()
def sample_csv(temp_workdir: Path, sample_csv_text: str) -> Path:
    f = temp_workdir / "data" / "people.csv"
    f.write_text(sample_csv_text, encoding="utf-8")
    return f


@pytest.fixture()
def sample_config_yaml() -> str:
    return """csv:
  delimiter: ","
  header: true
  format: yaml
  coerce_numbers: true
  inspect_rows: 2
genpass:
  length: 20
  symbol: false
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "rcli.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg
