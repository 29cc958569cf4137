from typing import Dict, List, Optional, Sequence

SMASeries = List[Optional[float]]


def calc_sma(prices: Sequence[float], n: int) -> SMASeries:
    """
    Simple moving average of `prices` over a trailing window of `n`.

    The result has one entry per price. The first n-1 entries are None
    because the window is not full yet; a window shorter than 1 or longer
    than the series gives None everywhere, which callers treat as
    "no signal".
    """
    size = len(prices)
    sma: SMASeries = [None] * size
    if n < 1 or n > size:
        return sma

    total = 0.0
    for i in range(n):
        total += prices[i]
    sma[n - 1] = float(total / n)

    # slide: one price enters, one leaves
    for i in range(n, size):
        total += prices[i] - prices[i - n]
        sma[i] = float(total / n)
    return sma


def all_windows(prices: Sequence[float], max_window: int) -> Dict[int, SMASeries]:
    """One SMA per window length 1 … max_window, computed once."""
    return {n: calc_sma(prices, n) for n in range(1, max_window + 1)}
