"""Shared fixtures for the Energy Chart tests."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest

from energy_chart.config import ChartConfig
from energy_chart.csv_parser import read_dataset
from energy_chart.layout import build_layout

THREE_ROWS = "year,China,India\n2000,50,10\n2005,55,12\n2010,60,15\n"


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a file under ``tmp_path`` and return its path."""

    def _write(text: str, name: str = "BRICSdata.csv") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def three_row_csv(write_csv) -> str:
    return write_csv(THREE_ROWS)


@pytest.fixture
def three_row_layout(three_row_csv):
    return build_layout(read_dataset(three_row_csv), ChartConfig(csv_path=three_row_csv))
