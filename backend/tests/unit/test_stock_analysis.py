"""Tests for stock snapshot analytics."""

from __future__ import annotations

import pytest

from stock_analyzer.analysis.stocks import (
    average_price,
    average_volume,
    calculate_pe,
    find_price_range,
    find_stock,
    gainers,
    highest_market_cap,
    highest_price,
    losers,
    market_cap,
    price_change_percentage,
    price_ratio,
    price_volatility,
    sort_by_change_percentage,
)
from stock_analyzer.data.samples import sample_stocks
from stock_analyzer.market.errors import AnalysisError
from stock_analyzer.market.types import PriceRecord, Stock
from tests.factories import make_record, make_stock


@pytest.fixture
def stocks() -> list[Stock]:
    return sample_stocks()


@pytest.fixture
def history() -> list[PriceRecord]:
    return [
        make_record(date="2025-05-04", high=795.0, low=785.0, volume=15_000_000),
        make_record(date="2025-05-05", high=802.0, low=790.0, volume=18_000_000),
        make_record(date="2025-05-06", high=808.0, low=798.0, volume=20_000_000),
        make_record(date="2025-05-07", high=812.0, low=800.0, volume=22_000_000),
        make_record(date="2025-05-08", high=826.0, low=810.0, volume=25_000_000),
    ]


class TestMarketCap:
    def test_price_times_shares(self) -> None:
        stock = make_stock(price=825.0, outstanding_shares=1_000)
        assert market_cap(stock) == pytest.approx(825_000.0)

    def test_highest_market_cap(self, stocks: list[Stock]) -> None:
        top = highest_market_cap(stocks)
        assert top is not None
        assert top.symbol == "2454"

    def test_highest_market_cap_empty(self) -> None:
        assert highest_market_cap([]) is None


class TestRatios:
    def test_pe(self) -> None:
        assert calculate_pe(make_stock(price=825.0), 10.0) == pytest.approx(82.5)

    def test_pe_zero_eps_is_none(self) -> None:
        assert calculate_pe(make_stock(), 0.0) is None

    def test_price_ratio(self) -> None:
        a = make_stock(price=150.0)
        b = make_stock(price=50.0)
        assert price_ratio(a, b) == pytest.approx(3.0)

    @pytest.mark.parametrize(("first", "second"), [(0.0, 50.0), (50.0, 0.0)])
    def test_price_ratio_zero_price_is_none(self, first: float, second: float) -> None:
        assert price_ratio(make_stock(price=first), make_stock(price=second)) is None


class TestPriceRange:
    def test_range_inclusive(self, history: list[PriceRecord]) -> None:
        assert find_price_range(history, "2025-05-05", "2025-05-07") == (812.0, 790.0)

    def test_whole_history(self, history: list[PriceRecord]) -> None:
        assert find_price_range(history, "2025-01-01", "2025-12-31") == (826.0, 785.0)

    def test_no_records_in_range(self, history: list[PriceRecord]) -> None:
        assert find_price_range(history, "2024-01-01", "2024-12-31") is None


class TestLookupAndFilters:
    def test_find_stock(self, stocks: list[Stock]) -> None:
        found = find_stock(stocks, "2317")
        assert found is not None
        assert found.name == "Hon Hai"

    def test_find_stock_missing(self, stocks: list[Stock]) -> None:
        assert find_stock(stocks, "9999") is None

    def test_gainers_and_losers(self, stocks: list[Stock]) -> None:
        assert [s.symbol for s in gainers(stocks)] == ["2330", "2317", "2412"]
        assert [s.symbol for s in losers(stocks)] == ["2454", "1301"]

    def test_unchanged_stock_is_neither(self) -> None:
        flat = make_stock(change=0.0)
        assert gainers([flat]) == []
        assert losers([flat]) == []


class TestAverages:
    def test_average_price(self, stocks: list[Stock]) -> None:
        expected = (825.0 + 1150.0 + 142.5 + 78.2 + 126.5) / 5
        assert average_price(stocks) == pytest.approx(expected)

    def test_average_price_empty(self) -> None:
        assert average_price([]) == 0.0

    def test_highest_price(self, stocks: list[Stock]) -> None:
        top = highest_price(stocks)
        assert top is not None
        assert top.symbol == "2454"

    def test_highest_price_empty(self) -> None:
        assert highest_price([]) is None

    def test_average_volume(self, history: list[PriceRecord]) -> None:
        assert average_volume(history) == pytest.approx(20_000_000.0)

    def test_average_volume_empty(self) -> None:
        assert average_volume([]) == 0.0


class TestChangePercentage:
    def test_change_relative_to_previous_price(self) -> None:
        stock = make_stock(price=110.0, change=10.0)
        assert price_change_percentage(stock) == pytest.approx(10.0)

    def test_negative_change(self) -> None:
        stock = make_stock(price=90.0, change=-10.0)
        assert price_change_percentage(stock) == pytest.approx(-10.0)

    def test_zero_previous_price_raises(self) -> None:
        with pytest.raises(AnalysisError, match="previous price is zero"):
            price_change_percentage(make_stock(price=5.0, change=5.0))

    def test_sort_descending(self, stocks: list[Stock]) -> None:
        ranked = sort_by_change_percentage(stocks)
        # TSMC +1.85%, Hon Hai +1.06%, CHT +0.40%, MediaTek -0.43%, FPC -1.01%
        assert [s.symbol for s in ranked] == ["2330", "2317", "2412", "2454", "1301"]


class TestVolatility:
    def test_daily_ranges(self, history: list[PriceRecord]) -> None:
        assert price_volatility(history) == pytest.approx([10.0, 12.0, 10.0, 12.0, 16.0])

    def test_empty(self) -> None:
        assert price_volatility([]) == []
