from collections.abc import Callable
import csv
from pathlib import Path

import pytest

from contract_check.config import Settings
from contract_check.pipeline import PipelineRunner
from tests.helpers import HEADER


@pytest.fixture()
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    def _write(rows: list[dict[str, str]], *, name: str = "data.csv", header: list[str] | None = None) -> Path:
        path = tmp_path / name
        with path.open("w", encoding="utf-8", newline="") as outfile:
            writer = csv.DictWriter(outfile, fieldnames=header or HEADER)
            writer.writeheader()
            writer.writerows(rows)
        return path

    return _write


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        app_name="contract-check",
        log_level="INFO",
        input_path=str(tmp_path / "data.csv"),
        csv_encoding="utf-8-sig",
        csv_delimiter=",",
        log_invalid_identifiers=False,
    )


@pytest.fixture()
def runner(test_settings: Settings) -> PipelineRunner:
    return PipelineRunner(test_settings)
