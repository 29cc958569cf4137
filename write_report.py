"""
Report output: one CSV holding a ranked section per instrument, plus
the console summary and the optional full-grid dump.

Section layout:

    rank,short,long,final_capital,return_pct,trades
    <blank>
    <first instrument rows>
    <blank>
    MMM,,,,,
    <blank>
    <MMM rows>
    <blank>
    ...

Capital and return are written as text ('-prefixed) so spreadsheets
keep every digit.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, TextIO

import pandas as pd

from pair_grid import GridResult, GridSearchResult
from sort_results import GRID_COLUMNS, REPORT_COLUMNS

log = logging.getLogger(__name__)


def _writer(fh: TextIO):
    return csv.writer(fh, lineterminator="\n")


def write_header(fh: TextIO) -> None:
    _writer(fh).writerow(REPORT_COLUMNS)
    fh.write("\n")


def append_section(fh: TextIO, label: str, ranked: pd.DataFrame, is_first: bool) -> None:
    w = _writer(fh)
    if not is_first:
        w.writerow([label] + [""] * (len(REPORT_COLUMNS) - 1))
        fh.write("\n")
    for r in ranked.itertuples(index=False):
        w.writerow([
            int(r.rank),
            int(r.short),
            int(r.long),
            f"'{r.final_capital:.30f}",
            f"'{r.return_pct:.4f}",
            int(r.trades),
        ])
    fh.write("\n")


def log_section(label: str, result: GridSearchResult, ranked: pd.DataFrame) -> None:
    best = result.best
    if best is None:
        log.info("==== %s ==== no results", label)
        return
    log.info("==== %s ==== best: short=%d long=%d final_capital=%.4f",
             label, best.short, best.long, best.final_capital)
    table = ranked.to_string(index=False, float_format=lambda v: f"{v:.4f}")
    log.info("Top %d for %s:\n%s", len(ranked), label, table)


def write_grid(path, results: Iterable[GridResult]) -> Path:
    """Dump every evaluated pair; sort_results.py can re-rank it later."""
    path = Path(path)
    df = pd.DataFrame(
        [(r.short, r.long, r.final_capital, r.trades) for r in results],
        columns=GRID_COLUMNS,
    )
    df.to_csv(path, index=False)
    log.info("Grid saved → %s (%d rows)", path, len(df))
    return path
