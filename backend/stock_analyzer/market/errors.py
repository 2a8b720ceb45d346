"""Analyzer error hierarchy.

All analyzer exceptions inherit from AnalysisError so the CLI can turn
them into a single user-facing failure. Insufficient data is never an
error: indicator functions return empty series instead.
"""

from __future__ import annotations


class AnalysisError(Exception):
    """Base exception for all analyzer errors."""


class InvalidPeriodError(AnalysisError, ValueError):
    """Indicator period or window outside its valid range."""

    def __init__(self, name: str, value: int, minimum: int = 1) -> None:
        self.name = name
        self.value = value
        self.minimum = minimum
        super().__init__(f"{name} must be >= {minimum}, got {value}")


class DataLoadError(AnalysisError):
    """Price history could not be read or parsed.

    Stores the source path and, where known, the 1-based line number.
    """

    def __init__(self, source: str, message: str, line: int | None = None) -> None:
        self.source = source
        self.line = line
        self.message = message
        where = f"{source}:{line}" if line is not None else source
        super().__init__(f"{where}: {message}")
