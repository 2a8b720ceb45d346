"""ASCII bar chart rendering for indicator series.

Each value becomes one fixed-width text row followed by a bar whose
length is proportional to the value's position inside the chart range.
"""

from __future__ import annotations

from collections.abc import Sequence

_LABEL_WIDTH = 12


def align_labels(dates: Sequence[str], series: Sequence[float]) -> list[str]:
    """Dates for a series aligned to a suffix of the history.

    Indicator series skip their warm-up dates, so the i-th value belongs to
    the i-th of the trailing len(series) dates.
    """
    if not series:
        return []
    return list(dates[-len(series) :])


def bar_length(value: float, lo: float, hi: float, width: int) -> int:
    """Bar length for value within [lo, hi]. Zero when the range is degenerate."""
    if hi == lo:
        return 0
    length = round((value - lo) / (hi - lo) * width)
    return max(0, min(width, length))


def render_series(
    values: Sequence[float],
    value_range: tuple[float, float] | None = None,
    *,
    labels: Sequence[str] | None = None,
    width: int = 40,
    bar_char: str = "#",
) -> list[str]:
    """Render values as chart rows.

    Args:
        values: Series to draw, one row per value.
        value_range: (min, max) of the chart. Defaults to the series extent.
        labels: Row labels (usually dates). Defaults to the row index.
        width: Bar length for a value equal to the range max.
        bar_char: Character the bars are drawn with.
    """
    if width < 1:
        raise ValueError(f"width must be >= 1, got {width}")
    if not values:
        return []
    if labels is not None and len(labels) != len(values):
        raise ValueError(
            f"got {len(labels)} labels for {len(values)} values"
        )

    lo, hi = value_range if value_range is not None else (min(values), max(values))
    rows = []
    for i, value in enumerate(values):
        label = labels[i] if labels is not None else str(i)
        bar = bar_char * bar_length(value, lo, hi, width)
        rows.append(f"{label:<{_LABEL_WIDTH}} {value:>10.2f} |{bar}")
    return rows
