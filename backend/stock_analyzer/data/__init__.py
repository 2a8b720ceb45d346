"""Data sources: CSV loader and built-in samples."""

from stock_analyzer.data.loader import load_price_history
from stock_analyzer.data.samples import sample_history, sample_stocks

__all__ = ["load_price_history", "sample_history", "sample_stocks"]
