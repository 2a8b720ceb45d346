"""Market domain: price records, stocks and the error hierarchy."""

from stock_analyzer.market.errors import AnalysisError, DataLoadError, InvalidPeriodError
from stock_analyzer.market.types import PriceRecord, Stock

__all__ = [
    "AnalysisError",
    "DataLoadError",
    "InvalidPeriodError",
    "PriceRecord",
    "Stock",
]
