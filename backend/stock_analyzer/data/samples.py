"""Built-in demonstration data: five TWSE-listed stocks and a daily history."""

from __future__ import annotations

from datetime import date, timedelta

from stock_analyzer.market.types import PriceRecord, Stock

_SAMPLE_START = date(2025, 3, 31)
_SAMPLE_DAYS = 40
# Repeating day-over-day wiggle on top of the upward drift
_WIGGLE = (0.0, 4.0, -3.0, 6.0, -2.0, 3.0, -5.0)


def sample_stocks() -> list[Stock]:
    return [
        Stock("2330", "TSMC", 825.0, 15.0, 1_000_000_000),
        Stock("2454", "MediaTek", 1150.0, -5.0, 1_000_000_000),
        Stock("2317", "Hon Hai", 142.5, 1.5, 1_000_000_000),
        Stock("1301", "Formosa Plastics", 78.2, -0.8, 1_000_000_000),
        Stock("2412", "Chunghwa Telecom", 126.5, 0.5, 1_000_000_000),
    ]


def sample_history(days: int = _SAMPLE_DAYS) -> list[PriceRecord]:
    """Weekday history in ascending date order, drifting upward with daily noise."""
    records: list[PriceRecord] = []
    day = _SAMPLE_START
    prev_close = 780.0
    for i in range(days):
        while day.weekday() >= 5:
            day += timedelta(days=1)
        close = 780.0 + 1.5 * i + _WIGGLE[i % len(_WIGGLE)]
        records.append(
            PriceRecord(
                date=day.isoformat(),
                open=prev_close,
                high=max(prev_close, close) + 2.0,
                low=min(prev_close, close) - 2.0,
                close=close,
                volume=15_000_000 + (i % 5) * 2_000_000,
            )
        )
        prev_close = close
        day += timedelta(days=1)
    return records
