"""Technical indicators over an ordered daily price history.

SMA, EMA, RSI and MACD are pure functions: each call recomputes from its
input sequence, nothing is cached, inputs are never mutated. Every series
is aligned to a suffix of the input dates (the leading warm-up dates have
no value). Insufficient history returns an empty list, not an error.

IndicatorEngine composes the functions with configured periods and
produces one IndicatorReport per history.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

from stock_analyzer.config import IndicatorConfig
from stock_analyzer.market.errors import InvalidPeriodError
from stock_analyzer.market.types import PriceRecord
from stock_analyzer.utils.logging import get_logger

log = get_logger(__name__)


def _check_period(name: str, value: int) -> None:
    if value < 1:
        raise InvalidPeriodError(name, value)


def closing_prices(history: Sequence[PriceRecord]) -> list[float]:
    """Closing prices in history order."""
    return [record.close for record in history]


def simple_moving_average(
    history: Sequence[PriceRecord],
    window_size: int,
) -> list[float]:
    """Mean close of each sliding window of ``window_size`` records.

    Output length is ``len(history) - window_size + 1``, or empty when the
    history is shorter than the window.
    """
    _check_period("window_size", window_size)
    closes = closing_prices(history)
    if len(closes) < window_size:
        return []
    return [
        sum(closes[i : i + window_size]) / window_size
        for i in range(len(closes) - window_size + 1)
    ]


def exponential_moving_average(
    prices: Sequence[float],
    period: int,
) -> list[float]:
    """EMA seeded with the simple mean of the first ``period`` prices.

    Smoothing factor is ``2 / (period + 1)``. The recurrence runs strictly
    left to right; each value depends on the previous one.
    """
    _check_period("period", period)
    if len(prices) < period:
        return []

    alpha = 2.0 / (period + 1)
    ema = sum(prices[:period]) / period
    result = [ema]
    for price in prices[period:]:
        ema = (price - ema) * alpha + ema
        result.append(ema)
    return result


def relative_strength_index(
    history: Sequence[PriceRecord],
    period: int = 14,
) -> list[float]:
    """RSI over overlapping windows of ``period`` close-to-close deltas.

    Gains and losses are plain window sums (no Wilder smoothing). A window
    with no losses scores 100.0, flat windows included. Output length is
    ``len(history) - period``; empty when ``len(history) <= period + 1``.
    """
    _check_period("period", period)
    if len(history) <= period + 1:
        return []

    closes = closing_prices(history)
    deltas = [closes[i] - closes[i - 1] for i in range(1, len(closes))]

    result: list[float] = []
    for start in range(len(deltas) - period + 1):
        window = deltas[start : start + period]
        gains = sum(d for d in window if d > 0)
        losses = -sum(d for d in window if d < 0)
        if losses == 0:
            result.append(100.0)
        else:
            rs = gains / losses
            result.append(100.0 - 100.0 / (1.0 + rs))
    return result


class MACDResult(NamedTuple):
    """MACD line, signal line and histogram."""

    macd_line: list[float]
    signal_line: list[float]
    histogram: list[float]


def moving_average_convergence_divergence(
    history: Sequence[PriceRecord],
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> MACDResult:
    """MACD triple from fast/slow EMAs of the closing prices.

    The fast and slow EMAs are paired index by index from their starts, and
    so are the MACD and signal lines. Neither pair is first aligned to a
    common date, so each pairing is offset by the difference in warm-up
    lengths (``slow - fast`` and ``signal - 1`` positions). Downstream
    consumers rely on this exact pairing; see DESIGN.md before changing it.
    Any positive periods are accepted here; IndicatorConfig enforces
    fast < slow.
    """
    _check_period("fast_period", fast_period)
    _check_period("slow_period", slow_period)
    _check_period("signal_period", signal_period)

    closes = closing_prices(history)
    fast_ema = exponential_moving_average(closes, fast_period)
    slow_ema = exponential_moving_average(closes, slow_period)
    if not fast_ema or not slow_ema:
        return MACDResult([], [], [])

    macd_line = [fast - slow for fast, slow in zip(fast_ema, slow_ema)]
    signal_line = exponential_moving_average(macd_line, signal_period)
    histogram = [macd - signal for macd, signal in zip(macd_line, signal_line)]
    return MACDResult(macd_line, signal_line, histogram)


@dataclass(frozen=True)
class IndicatorReport:
    """All indicator series computed for one price history.

    Series may be empty when the history is too short for their period.
    """

    sma: list[float]
    rsi: list[float]
    macd: MACDResult
    record_count: int
    sma_window: int
    rsi_period: int

    @property
    def latest_sma(self) -> float | None:
        return self.sma[-1] if self.sma else None

    @property
    def latest_rsi(self) -> float | None:
        return self.rsi[-1] if self.rsi else None

    @property
    def latest_macd(self) -> float | None:
        return self.macd.macd_line[-1] if self.macd.macd_line else None


class IndicatorEngine:
    """Computes every configured indicator for a price history.

    Holds periods only; no state carries over between analyze() calls.
    """

    def __init__(self, config: IndicatorConfig | None = None) -> None:
        self._config = config or IndicatorConfig()

    @property
    def config(self) -> IndicatorConfig:
        return self._config

    def analyze(self, history: Sequence[PriceRecord]) -> IndicatorReport:
        cfg = self._config
        sma = simple_moving_average(history, cfg.sma_window)
        rsi = relative_strength_index(history, cfg.rsi_period)
        macd = moving_average_convergence_divergence(
            history,
            fast_period=cfg.macd_fast,
            slow_period=cfg.macd_slow,
            signal_period=cfg.macd_signal,
        )

        empty = [
            name
            for name, series in (("sma", sma), ("rsi", rsi), ("macd", macd.macd_line))
            if not series
        ]
        if empty:
            log.debug(
                "indicator_insufficient_data",
                record_count=len(history),
                empty_series=empty,
            )

        log.info(
            "indicators_computed",
            record_count=len(history),
            sma_points=len(sma),
            rsi_points=len(rsi),
            macd_points=len(macd.macd_line),
        )

        return IndicatorReport(
            sma=sma,
            rsi=rsi,
            macd=macd,
            record_count=len(history),
            sma_window=cfg.sma_window,
            rsi_period=cfg.rsi_period,
        )
