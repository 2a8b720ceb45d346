"""Engine layer: technical indicator calculation."""

from stock_analyzer.engine.indicators import (
    IndicatorEngine,
    IndicatorReport,
    MACDResult,
    closing_prices,
    exponential_moving_average,
    moving_average_convergence_divergence,
    relative_strength_index,
    simple_moving_average,
)

__all__ = [
    "IndicatorEngine",
    "IndicatorReport",
    "MACDResult",
    "closing_prices",
    "exponential_moving_average",
    "moving_average_convergence_divergence",
    "relative_strength_index",
    "simple_moving_average",
]
