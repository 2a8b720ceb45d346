"""Click CLI commands for stock-analyzer."""

from __future__ import annotations

from collections.abc import Sequence

import click

from stock_analyzer.config import AppConfig, ChartConfig
from stock_analyzer.market.errors import AnalysisError
from stock_analyzer.utils.logging import analysis_context, setup_logging

_RSI_RANGE = (0.0, 100.0)


@click.group()
def cli() -> None:
    """Stock-analyzer: technical indicators over daily price histories."""


@cli.command()
@click.option(
    "--csv",
    "csv_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="CSV with date,open,high,low,close,volume (default: built-in sample).",
)
@click.option("--sma", "sma_window", type=int, default=None, help="SMA window.")
@click.option("--rsi", "rsi_period", type=int, default=None, help="RSI period.")
@click.option("--chart/--no-chart", default=True, help="Draw ASCII charts.")
def analyze(
    csv_path: str | None,
    sma_window: int | None,
    rsi_period: int | None,
    chart: bool,
) -> None:
    """Compute SMA, RSI and MACD for a price history."""
    from pydantic import ValidationError

    from stock_analyzer.data import load_price_history, sample_history
    from stock_analyzer.engine.indicators import IndicatorEngine

    config = AppConfig()
    setup_logging(config.log_level, config.log_format)

    overrides = {
        k: v
        for k, v in (("sma_window", sma_window), ("rsi_period", rsi_period))
        if v is not None
    }
    try:
        indicator_config = config.indicators.model_validate(
            {**config.indicators.model_dump(), **overrides}
        )
    except ValidationError as e:
        raise click.ClickException(str(e)) from e

    try:
        with analysis_context():
            history = load_price_history(csv_path) if csv_path else sample_history()
            report = IndicatorEngine(indicator_config).analyze(history)
    except AnalysisError as e:
        raise click.ClickException(str(e)) from e

    dates = [r.date for r in history]
    source = csv_path or "built-in sample"

    click.echo(f"\nIndicator Report: {source}")
    click.echo(f"Records: {report.record_count}")
    if history:
        click.echo(f"Period:  {history[0].date} to {history[-1].date}")

    click.echo("\nLatest:")
    click.echo(f"  SMA({report.sma_window}):  {_fmt(report.latest_sma)}")
    click.echo(f"  RSI({report.rsi_period}):  {_fmt(report.latest_rsi)}")
    click.echo(f"  MACD:     {_fmt(report.latest_macd)}")
    signal = report.macd.signal_line
    click.echo(f"  Signal:   {_fmt(signal[-1] if signal else None)}")

    if not chart:
        return

    _print_chart(f"SMA({report.sma_window})", report.sma, dates, None, config.chart)
    _print_chart(f"RSI({report.rsi_period})", report.rsi, dates, _RSI_RANGE, config.chart)


@cli.command()
def stocks() -> None:
    """Summarize the built-in sample stocks."""
    from stock_analyzer.analysis import stocks as analysis
    from stock_analyzer.data import sample_stocks

    sample = sample_stocks()

    click.echo("\nMarket Cap:")
    for s in sample:
        click.echo(f"  {s.symbol} {s.name:<18} {analysis.market_cap(s):>20,.0f}")
    top = analysis.highest_market_cap(sample)
    if top is not None:
        click.echo(f"  Highest: {top.symbol} {top.name}")

    click.echo("\nGainers:")
    for s in analysis.gainers(sample):
        click.echo(f"  {s.name}: {s.change:+.2f}")

    click.echo("\nLosers:")
    for s in analysis.losers(sample):
        click.echo(f"  {s.name}: {s.change:+.2f}")

    click.echo(f"\nAverage Price: {analysis.average_price(sample):.2f}")

    click.echo("\nBy Change %:")
    try:
        ranked = analysis.sort_by_change_percentage(sample)
        for s in ranked:
            pct = analysis.price_change_percentage(s)
            click.echo(f"  {s.name}: {pct:.2f}%")
    except AnalysisError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
def config() -> None:
    """Show current configuration."""
    cfg = AppConfig()

    click.echo("=== Stock-Analyzer Configuration ===\n")

    click.echo(f"Log Level:    {cfg.log_level}")
    click.echo(f"Log Format:   {cfg.log_format}")
    click.echo("")

    click.echo("[Indicators]")
    click.echo(f"  SMA Window:   {cfg.indicators.sma_window}")
    click.echo(f"  RSI Period:   {cfg.indicators.rsi_period}")
    click.echo(
        f"  MACD:         {cfg.indicators.macd_fast}/"
        f"{cfg.indicators.macd_slow}/{cfg.indicators.macd_signal}"
    )
    click.echo("")

    click.echo("[Chart]")
    click.echo(f"  Width:        {cfg.chart.width}")
    click.echo(f"  Bar Char:     {cfg.chart.bar_char}")


def _fmt(value: float | None) -> str:
    return f"{value:.2f}" if value is not None else "n/a"


def _print_chart(
    title: str,
    series: Sequence[float],
    dates: Sequence[str],
    value_range: tuple[float, float] | None,
    chart: ChartConfig,
) -> None:
    from stock_analyzer.presentation.chart import align_labels, render_series

    click.echo(f"\n{title}:")
    if not series:
        click.echo("  Not enough data.")
        return
    rows = render_series(
        series,
        value_range,
        labels=align_labels(dates, series),
        width=chart.width,
        bar_char=chart.bar_char,
    )
    for row in rows:
        click.echo(f"  {row}")
