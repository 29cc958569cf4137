"""
Load the multi-instrument close file and cut per-instrument series.

Expected layout (first column is the date label):

    Date,AAPL,MSFT,...
    01/02/2024,185.64,370.87,...
"""

import csv
import logging
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple

import numpy as np
import pandas as pd

from errors import DateWindowNotFound, EmptySeries, PriceFileError, UnknownInstrument

log = logging.getLogger(__name__)


def _rows(path: Path) -> Iterator[Tuple[int, List[str]]]:
    with path.open(newline="") as fh:
        for lineno, row in enumerate(csv.reader(fh), start=1):
            yield lineno, [tok.strip() for tok in row]


def load_price_table(path) -> pd.DataFrame:
    """
    Read the close file into a DataFrame indexed by date label, one float
    column per instrument.

    Blank lines are ignored. Rows with the wrong number of fields or a
    price that is not a number are logged and dropped.
    """
    path = Path(path)
    try:
        rows = _rows(path)
        _, header = next(rows, (0, []))
        if not header:
            raise PriceFileError(f"{path} is empty")
        if len(header) < 2:
            raise PriceFileError(f"{path}: header has too few columns: {header}")

        dates, records = [], []
        for lineno, tokens in rows:
            if not any(tokens):
                continue
            if len(tokens) != len(header):
                log.warning("line %d: expected %d fields, got %d, skipped",
                            lineno, len(header), len(tokens))
                continue
            try:
                values = [float(tok) for tok in tokens[1:]]
            except ValueError as e:
                log.warning("line %d: %s, skipped", lineno, e)
                continue
            dates.append(tokens[0])
            records.append(values)
    except OSError as e:
        raise PriceFileError(f"cannot read {path}: {e}") from e

    table = pd.DataFrame(
        records,
        columns=header[1:],
        index=pd.Index(dates, name=header[0]),
        dtype=float,
    )
    log.info("Loaded %s | %d instruments | %d days", path, table.shape[1], table.shape[0])
    return table


def instrument_series(table: pd.DataFrame, symbol: str) -> Tuple[np.ndarray, List[str]]:
    """Close prices and their date labels for one instrument."""
    if symbol not in table.columns:
        raise UnknownInstrument(f"symbol not found: {symbol}")
    prices = table[symbol].to_numpy(dtype=float)
    if len(prices) == 0:
        raise EmptySeries(f"no {symbol} data")
    return prices, [str(d) for d in table.index]


def find_year_window(dates: Sequence[str], year: str) -> Tuple[int, int]:
    """
    First and last index whose date label contains "/<year>".

    Labels are matched as text (MM/DD/YYYY style), not parsed.
    """
    needle = f"/{year}"
    hits = [i for i, d in enumerate(dates) if needle in d]
    if not hits:
        raise DateWindowNotFound(f"no {year} data")
    return hits[0], hits[-1]
