"""Pydantic Settings configuration models.

3-tier config hierarchy (lowest to highest priority):
1. Pydantic defaults (in code below)
2. .env file (loaded by Pydantic Settings)
3. Environment variables (e.g., STOCK_INDICATORS__RSI_PERIOD=21)
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
VALID_LOG_FORMATS = frozenset({"console", "json"})


class IndicatorConfig(BaseModel):
    """Indicator periods with validation bounds."""

    sma_window: int = Field(default=5, ge=1, le=200)
    rsi_period: int = Field(default=14, ge=2, le=100)
    macd_fast: int = Field(default=12, ge=2, le=100)
    macd_slow: int = Field(default=26, ge=3, le=200)
    macd_signal: int = Field(default=9, ge=1, le=50)

    @model_validator(mode="after")
    def validate_macd_periods(self) -> IndicatorConfig:
        if self.macd_fast >= self.macd_slow:
            raise ValueError(
                f"macd_fast must be less than macd_slow, "
                f"got {self.macd_fast} >= {self.macd_slow}"
            )
        return self


class ChartConfig(BaseModel):
    """ASCII chart rendering."""

    width: int = Field(default=40, ge=10, le=200)
    bar_char: str = "#"

    @field_validator("bar_char")
    @classmethod
    def validate_bar_char(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"bar_char must be a single character, got {v!r}")
        return v


class AppConfig(BaseSettings):
    """Top-level application configuration.

    Env var examples:
        STOCK_LOG_LEVEL=DEBUG
        STOCK_INDICATORS__SMA_WINDOW=10
        STOCK_CHART__WIDTH=60
    """

    model_config = SettingsConfigDict(
        env_prefix="STOCK_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: str = "console"
    indicators: IndicatorConfig = IndicatorConfig()
    chart: ChartConfig = ChartConfig()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {v}"
            )
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in VALID_LOG_FORMATS:
            raise ValueError(
                f"log_format must be one of {sorted(VALID_LOG_FORMATS)}, got {v}"
            )
        return v
