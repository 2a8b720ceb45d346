"""Snapshot analytics over stock quotes and price histories. Pure functions, no I/O.

Lookups and ratios that can have no answer (empty input, zero divisor)
return None. price_change_percentage raises AnalysisError instead.
"""

from __future__ import annotations

from collections.abc import Sequence

from stock_analyzer.market.errors import AnalysisError
from stock_analyzer.market.types import PriceRecord, Stock


def market_cap(stock: Stock) -> float:
    """Price times outstanding shares."""
    return stock.price * stock.outstanding_shares


def highest_market_cap(stocks: Sequence[Stock]) -> Stock | None:
    return max(stocks, key=market_cap, default=None)


def calculate_pe(stock: Stock, eps: float) -> float | None:
    """Price / earnings per share. None when eps is zero."""
    if eps == 0:
        return None
    return stock.price / eps


def price_ratio(first: Stock, second: Stock) -> float | None:
    """first.price / second.price. None if either price is zero."""
    if first.price == 0 or second.price == 0:
        return None
    return first.price / second.price


def find_price_range(
    history: Sequence[PriceRecord],
    start_date: str,
    end_date: str,
) -> tuple[float, float] | None:
    """(highest high, lowest low) over records dated within [start_date, end_date].

    Dates compare as ISO strings. Returns None when no record falls in range.
    """
    in_range = [r for r in history if start_date <= r.date <= end_date]
    if not in_range:
        return None
    return max(r.high for r in in_range), min(r.low for r in in_range)


def find_stock(stocks: Sequence[Stock], symbol: str) -> Stock | None:
    return next((s for s in stocks if s.symbol == symbol), None)


def gainers(stocks: Sequence[Stock]) -> list[Stock]:
    return [s for s in stocks if s.change > 0]


def losers(stocks: Sequence[Stock]) -> list[Stock]:
    return [s for s in stocks if s.change < 0]


def average_price(stocks: Sequence[Stock]) -> float:
    """Mean price, 0.0 for no stocks."""
    if not stocks:
        return 0.0
    return sum(s.price for s in stocks) / len(stocks)


def highest_price(stocks: Sequence[Stock]) -> Stock | None:
    return max(stocks, key=lambda s: s.price, default=None)


def price_change_percentage(stock: Stock) -> float:
    """Change relative to the previous price (price - change), in percent.

    Raises AnalysisError when the previous price is zero.
    """
    previous = stock.price - stock.change
    if previous == 0:
        raise AnalysisError(
            f"{stock.symbol}: previous price is zero, change percentage undefined"
        )
    return stock.change / previous * 100.0


def sort_by_change_percentage(stocks: Sequence[Stock]) -> list[Stock]:
    """Biggest percentage gainer first. Ties keep input order."""
    return sorted(stocks, key=price_change_percentage, reverse=True)


def average_volume(history: Sequence[PriceRecord]) -> float:
    """Mean traded volume, 0.0 for an empty history."""
    if not history:
        return 0.0
    return sum(r.volume for r in history) / len(history)


def price_volatility(history: Sequence[PriceRecord]) -> list[float]:
    """Daily trading range (high - low) per record."""
    return [r.high - r.low for r in history]
