"""Market value objects shared across the analyzer.

Both types are frozen dataclasses: records are produced once by a data
source and never mutated. Prices are plain floats (indicator math is float
arithmetic end to end).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PriceRecord:
    """One daily OHLCV record.

    ``date`` is an ISO ``YYYY-MM-DD`` string, so lexical order is date order.
    """

    date: str
    open: float
    high: float
    low: float
    close: float
    volume: int


@dataclass(frozen=True)
class Stock:
    """Quote snapshot for a listed stock."""

    symbol: str
    name: str
    price: float
    change: float
    outstanding_shares: int
