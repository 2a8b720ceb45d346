"""CSV price history loader.

Reads ``date,open,high,low,close,volume`` rows into PriceRecord objects.
Rows are returned in file order; callers supply ascending dates.
"""

from __future__ import annotations

import csv
import math
from pathlib import Path

from stock_analyzer.market.errors import DataLoadError
from stock_analyzer.market.types import PriceRecord
from stock_analyzer.utils.logging import get_logger

log = get_logger(__name__)

REQUIRED_COLUMNS = ("date", "open", "high", "low", "close", "volume")


def load_price_history(path: str | Path) -> list[PriceRecord]:
    """Load a daily price history from a CSV file.

    Raises DataLoadError for a missing file, missing columns, or a row that
    does not parse into finite non-negative prices and a non-negative
    volume. Undecodable bytes and malformed CSV are rejected too.
    """
    source = str(path)
    try:
        with open(path, newline="", encoding="utf-8") as fh:
            reader = csv.DictReader(fh)
            try:
                records = _read_rows(reader, source)
            except csv.Error as e:
                raise DataLoadError(
                    source, f"malformed CSV: {e}", line=reader.line_num
                ) from e
    except UnicodeDecodeError as e:
        # Decoding is chunked, so only the byte offset is meaningful
        raise DataLoadError(
            source, f"not valid UTF-8 at byte {e.start}: {e.reason}"
        ) from e
    except OSError as e:
        raise DataLoadError(source, f"cannot read file: {e.strerror or e}") from e

    log.info("price_history_loaded", source=source, record_count=len(records))
    return records


def _read_rows(reader: csv.DictReader[str], source: str) -> list[PriceRecord]:
    missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
    if missing:
        raise DataLoadError(source, f"missing columns: {', '.join(missing)}")
    return [_parse_row(row, source, reader.line_num) for row in reader]


def _parse_row(row: dict[str, str], source: str, line: int) -> PriceRecord:
    try:
        record = PriceRecord(
            date=row["date"].strip(),
            open=float(row["open"]),
            high=float(row["high"]),
            low=float(row["low"]),
            close=float(row["close"]),
            volume=int(row["volume"]),
        )
    except (TypeError, ValueError) as e:
        raise DataLoadError(source, f"invalid row: {e}", line=line) from e

    if not record.date:
        raise DataLoadError(source, "empty date", line=line)
    prices = (record.open, record.high, record.low, record.close)
    if not all(math.isfinite(p) for p in prices):
        raise DataLoadError(source, "non-finite price", line=line)
    if min(prices) < 0:
        raise DataLoadError(source, "negative price", line=line)
    if record.volume < 0:
        raise DataLoadError(source, "negative volume", line=line)
    return record
