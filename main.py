#!/usr/bin/env python3
"""
SMA pair grid search over one calendar year, per instrument.

Reads the close file, brute-forces every (short, long) SMA window pair
for each symbol and appends the top pairs to one sectioned CSV.
A symbol that cannot be analysed is skipped with a warning.
"""

import argparse
import logging
import sys
from pathlib import Path

import settings
from errors import InputError, PriceFileError
from load_prices import find_year_window, instrument_series, load_price_table
from pair_grid import brute_force
from sort_results import rank_results, to_frame
from write_report import append_section, log_section, write_grid, write_header

log = logging.getLogger("sma-grid")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Brute-force SMA crossover window search")
    parser.add_argument("--csv", default=settings.CSV_PATH,
                        help="close file, first column Date then one column per symbol")
    parser.add_argument("--out", default=settings.OUT_CSV, help="ranked report CSV")
    parser.add_argument("--symbols", nargs="+", default=settings.SYMBOLS)
    parser.add_argument("--year", default=settings.YEAR,
                        help="trade only on dates whose label contains /YEAR")
    parser.add_argument("--max-window", type=int, default=settings.MAX_WINDOW)
    parser.add_argument("--top", type=int, default=settings.TOP_N)
    parser.add_argument("--capital", type=float, default=settings.INITIAL_CAPITAL)
    parser.add_argument("--workers", type=int, default=settings.WORKERS,
                        help="processes for the grid, 0 = one per CPU")
    parser.add_argument("--grid-dir", default=None,
                        help="also dump every pair to <dir>/<SYMBOL>_grid.csv")
    return parser.parse_args(argv)


def run_symbol(table, symbol: str, fh, is_first: bool, args: argparse.Namespace) -> None:
    prices, dates = instrument_series(table, symbol)
    start, end = find_year_window(dates, args.year)
    log.info("=== %s === %s window idx %d ~ %d (%d days)",
             symbol, args.year, start, end, end - start + 1)

    result = brute_force(
        prices, start, end,
        max_window=args.max_window,
        initial_capital=args.capital,
        workers=args.workers or None,
    )
    ranked = to_frame(rank_results(result.results, args.top), args.capital)
    log_section(symbol, result, ranked)
    append_section(fh, symbol, ranked, is_first)

    if args.grid_dir:
        write_grid(Path(args.grid_dir) / f"{symbol}_grid.csv", result.results)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        table = load_price_table(args.csv)
    except PriceFileError as e:
        log.error("%s", e)
        return 1

    if args.grid_dir:
        Path(args.grid_dir).mkdir(parents=True, exist_ok=True)

    try:
        fh = open(args.out, "w", newline="", encoding="utf-8")
    except OSError as e:
        log.error("cannot open output %s: %s", args.out, e)
        return 1

    done = 0
    with fh:
        write_header(fh)
        for pos, symbol in enumerate(args.symbols):
            try:
                # only the first listed symbol goes unlabeled, even if it is skipped
                run_symbol(table, symbol, fh, is_first=(pos == 0), args=args)
            except InputError as e:
                log.warning("%s skipped: %s", symbol, e)
                continue
            done += 1

    log.info("All done | %d/%d symbols → %s", done, len(args.symbols), args.out)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=settings.LOG_FORMAT,
                        datefmt=settings.LOG_DATEFMT)
    sys.exit(main())
