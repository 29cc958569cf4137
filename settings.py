"""
Run settings for the SMA pair grid search.

Change the defaults here, or override any of them per run through the
matching SMA_GRID_* environment variable.
"""

import os

# ------------------------------------------------------------------
# USER CONTROLS
# ------------------------------------------------------------------
INITIAL_CAPITAL = 10_000.0
MAX_WINDOW      = int(os.getenv("SMA_GRID_MAX_WINDOW", "256"))     # windows 1 … 256
TOP_N           = int(os.getenv("SMA_GRID_TOP_N", "20"))
WORKERS         = int(os.getenv("SMA_GRID_WORKERS", "1"))          # 1 = sequential
CSV_PATH        = os.getenv("SMA_GRID_CSV", "multistocks.csv")
OUT_CSV         = os.getenv("SMA_GRID_OUT", "sma_rank_all.csv")
YEAR            = os.getenv("SMA_GRID_YEAR", "2024")
SYMBOLS         = ["AAPL", "MMM", "KO", "V", "CAT"]

LOG_FORMAT  = "%(asctime)s | %(levelname)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
