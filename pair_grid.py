"""
Brute-force SMA grid: every (short, long) pair in 1 … MAX_WINDOW
on both axes, including short == long and short > long.

Each window's SMA is computed once up front, so the grid costs
MAX_WINDOW SMA passes plus MAX_WINDOW² back-tests.
"""

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from backtest import simulate_with_capital_range
from errors import InvalidWindowBound
from settings import INITIAL_CAPITAL, MAX_WINDOW
from sma import SMASeries, all_windows

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridResult:
    short: int
    long: int
    final_capital: float
    trades: int


@dataclass
class GridSearchResult:
    results: List[GridResult] = field(default_factory=list)
    best: Optional[GridResult] = None


def evaluate_pair(
    s: int,
    l: int,
    prices: Sequence[float],
    smas: Dict[int, SMASeries],
    start_idx: int,
    end_idx: int,
    initial_capital: float = INITIAL_CAPITAL,
) -> GridResult:
    sr = simulate_with_capital_range(prices, smas[s], smas[l], start_idx, end_idx, initial_capital)
    return GridResult(s, l, sr.final_capital, sr.trades)


def _evaluate_row(s, prices, smas, start_idx, end_idx, initial_capital, max_window):
    return [
        evaluate_pair(s, l, prices, smas, start_idx, end_idx, initial_capital)
        for l in range(1, max_window + 1)
    ]


# ---------- process pool ----------
# set once per worker process by _init_worker; tasks carry only `s`
_worker_args: tuple = ()


def _init_worker(prices, smas, start_idx, end_idx, initial_capital, max_window):
    global _worker_args
    _worker_args = (prices, smas, start_idx, end_idx, initial_capital, max_window)


def _worker_row(s: int) -> List[GridResult]:
    return _evaluate_row(s, *_worker_args)


def _resolve_workers(workers: Optional[int], rows: int) -> int:
    if workers is None:
        return min(os.cpu_count() or 1, rows)
    return max(1, min(workers, rows))


def brute_force(
    prices: Sequence[float],
    start_idx: int,
    end_idx: int,
    max_window: int = MAX_WINDOW,
    initial_capital: float = INITIAL_CAPITAL,
    workers: Optional[int] = 1,
) -> GridSearchResult:
    """
    Back-test every window pair on prices[start_idx … end_idx].

    Results come back short-major, long-minor whatever the worker count.
    `best` is the first pair with the strictly highest final capital in
    that order. workers=None uses one process per CPU.
    """
    if max_window <= 0:
        raise InvalidWindowBound(f"max window must be positive, got {max_window}")
    if len(prices) == 0:
        return GridSearchResult()

    smas = all_windows(prices, max_window)
    shorts = range(1, max_window + 1)
    workers = _resolve_workers(workers, max_window)
    log.info("Testing %s pairs | windows 1-%d | workers %d",
             f"{max_window * max_window:,}", max_window, workers)

    if workers == 1:
        rows = [
            _evaluate_row(s, prices, smas, start_idx, end_idx, initial_capital, max_window)
            for s in shorts
        ]
    else:
        with ProcessPoolExecutor(
            max_workers=workers,
            initializer=_init_worker,
            initargs=(prices, smas, start_idx, end_idx, initial_capital, max_window),
        ) as pool:
            # map keeps submission order
            rows = list(pool.map(_worker_row, shorts))

    out = GridSearchResult()
    for row in rows:
        for res in row:
            out.results.append(res)
            if out.best is None or res.final_capital > out.best.final_capital:
                out.best = res
    return out
