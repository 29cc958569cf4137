#!/usr/bin/env python3
"""
Rank SMA grid results.

Order: final capital (high first), then the spread |short - long|
(wide first), then short, then long (both low first). The last two
keys make the order total.

Usage:
    python sort_results.py AAPL_grid.csv [top_n]
"""

import logging
import sys
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from pair_grid import GridResult
from settings import INITIAL_CAPITAL, LOG_DATEFMT, LOG_FORMAT, TOP_N

log = logging.getLogger(__name__)

GRID_COLUMNS = ["short", "long", "final_capital", "trades"]
REPORT_COLUMNS = ["rank", "short", "long", "final_capital", "return_pct", "trades"]


def rank_results(results: Iterable[GridResult], top_n: int = TOP_N) -> List[GridResult]:
    df = pd.DataFrame(
        [(r.short, r.long, r.final_capital, r.trades) for r in results],
        columns=GRID_COLUMNS,
    )
    if df.empty:
        return []
    df["spread"] = (df["short"] - df["long"]).abs()
    df = df.sort_values(
        ["final_capital", "spread", "short", "long"],
        ascending=[False, False, True, True],
    )
    return [
        GridResult(int(r.short), int(r.long), float(r.final_capital), int(r.trades))
        for r in df.head(max(top_n, 0)).itertuples(index=False)
    ]


def to_frame(ranked: List[GridResult], initial_capital: float = INITIAL_CAPITAL) -> pd.DataFrame:
    """Report table: 1-based rank plus return % against the starting cash."""
    df = pd.DataFrame(
        [(r.short, r.long, r.final_capital, r.trades) for r in ranked],
        columns=GRID_COLUMNS,
    )
    df.insert(0, "rank", range(1, len(df) + 1))
    df["return_pct"] = (df["final_capital"] / initial_capital - 1.0) * 100.0
    return df[REPORT_COLUMNS]


def load_grid(path: Path) -> List[GridResult]:
    """Read a grid dump written by write_report.write_grid."""
    df = pd.read_csv(path, float_precision="round_trip")
    missing = set(GRID_COLUMNS) - set(df.columns)
    if missing:
        raise ValueError(f"{path}: missing columns {sorted(missing)}")
    return [
        GridResult(int(r.short), int(r.long), float(r.final_capital), int(r.trades))
        for r in df[GRID_COLUMNS].itertuples(index=False)
    ]


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) not in (1, 2):
        print("Usage: python sort_results.py <grid.csv> [top_n]")
        return 1

    grid_file = Path(argv[0])
    if not grid_file.exists():
        print(f"File not found: {grid_file}")
        return 1
    try:
        top_n = int(argv[1]) if len(argv) == 2 else TOP_N
        results = load_grid(grid_file)
    except ValueError as e:
        print(f"Bad input: {e}")
        return 1
    if not results:
        print("No result rows found.")
        return 0

    table = to_frame(rank_results(results, top_n))
    log.info("%d pairs ranked from %s", len(results), grid_file)
    print(table.to_string(index=False, float_format=lambda v: f"{v:.4f}"))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    sys.exit(main())
