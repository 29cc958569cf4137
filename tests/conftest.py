"""Shared fixtures: deterministic close series and close files."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest


def make_closes(n: int = 150, seed: int = 7, start: float = 100.0) -> np.ndarray:
    """Random-walk closes, floored well above zero."""
    rng = np.random.default_rng(seed)
    closes = start + np.cumsum(rng.normal(0.0, 2.0, n))
    return np.maximum(closes, 5.0).round(2)


def write_close_file(path: Path, symbols: list[str], n: int = 150,
                     first_day: str = "2023-10-02") -> Path:
    dates = pd.date_range(first_day, periods=n, freq="B").strftime("%m/%d/%Y")
    df = pd.DataFrame(
        {sym: make_closes(n, seed=i) for i, sym in enumerate(symbols)},
        index=pd.Index(dates, name="Date"),
    )
    df.to_csv(path)
    return path


@pytest.fixture
def closes() -> np.ndarray:
    return make_closes()


@pytest.fixture
def close_file(tmp_path: Path) -> Path:
    return write_close_file(tmp_path / "multistocks.csv", ["AAPL", "KO"])
