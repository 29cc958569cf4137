"""
Golden-cross buy / death-cross sell back-test on one price series.

Whole shares only, one position at a time, no fees. Anything still held
on the last day of the range is sold at that day's close and counts as
a trade.
"""

from typing import NamedTuple, Optional, Sequence

from settings import INITIAL_CAPITAL


class SimResult(NamedTuple):
    final_capital: float
    trades: int


def _diff(fast: Optional[float], slow: Optional[float]) -> Optional[float]:
    if fast is None or slow is None:
        return None
    return fast - slow


def simulate_with_capital_range(
    prices: Sequence[float],
    sma_fast: Sequence[Optional[float]],
    sma_slow: Sequence[Optional[float]],
    start_idx: int,
    end_idx: int,
    initial_capital: float = INITIAL_CAPITAL,
) -> SimResult:
    """
    Replay the crossover rule on prices[start_idx … end_idx].

    A cross on day i is traded at the close of day i. Buying is not
    allowed on the first day of the range even when the averages cross
    there. Days where either average is undefined, today or yesterday,
    are skipped.
    """
    n = len(prices)
    if n == 0:
        return SimResult(initial_capital, 0)

    start_idx = max(start_idx, 0)
    end_idx = min(end_idx, n - 1)
    if start_idx >= end_idx:
        return SimResult(initial_capital, 0)
    # day 0 has no yesterday to compare against
    start_idx = max(start_idx, 1)

    cash = initial_capital
    shares = 0
    trades = 0

    for i in range(start_idx, end_idx + 1):
        d_prev = _diff(sma_fast[i - 1], sma_slow[i - 1])
        d_now = _diff(sma_fast[i], sma_slow[i])
        if d_prev is None or d_now is None:
            continue

        price = prices[i]
        if shares == 0:
            # golden cross
            if i != start_idx and d_prev < 0 and d_now > 0:
                buy_shares = int(cash / price) if price > 0 else 0
                if buy_shares > 0:
                    shares = buy_shares
                    cash -= buy_shares * price
                    trades += 1
        elif d_prev > 0 and d_now < 0:
            # death cross
            cash += shares * price
            shares = 0
            trades += 1

    if shares > 0:
        cash += shares * prices[end_idx]
        shares = 0
        trades += 1

    return SimResult(float(cash), trades)
