"""Shared test fixtures for stock-analyzer."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest
import structlog
from hypothesis import HealthCheck, settings

from stock_analyzer.market.types import PriceRecord
from tests.factories import make_history

# Autouse env/logging fixtures below are function-scoped
settings.register_profile(
    "stock_analyzer",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("stock_analyzer")


@pytest.fixture(autouse=True)
def _clean_env() -> Iterator[None]:
    """Drop STOCK_* variables so tests see code defaults."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("STOCK_")}
    with patch.dict("os.environ", env, clear=True):
        yield


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo setup_logging() so handlers never outlive a captured stream."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def five_day_history() -> list[PriceRecord]:
    """Closes 103, 106, 105, 102, 101 on consecutive days."""
    return make_history([103.0, 106.0, 105.0, 102.0, 101.0])
