"""
Chart payloads for the calculator views.

Builds renderer-neutral `labels` + `datasets` dictionaries (the shape
Chart.js consumes) from engine output. Styling is passed in explicitly as a
ChartStyle; nothing is registered globally.
"""

import math
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel

from fincalc.calculations.models import (
    InflationSeries,
    InvestmentSeries,
    MortgageBreakdown,
)


class SeriesColor(BaseModel):
    border: str
    background: str


class ChartStyle(BaseModel):
    """Colors and line options for every calculator chart."""

    currency_symbol: str = "$"
    fill: bool = True
    tension: float = 0.4

    balance: SeriesColor = SeriesColor(border="#28a745", background="rgba(40, 167, 69, 0.2)")
    principal: SeriesColor = SeriesColor(border="#007bff", background="rgba(0, 123, 255, 0.2)")
    interest: SeriesColor = SeriesColor(border="#ffc107", background="rgba(255, 193, 7, 0.2)")

    adjusted_value: SeriesColor = SeriesColor(border="#007bff", background="rgba(0, 123, 255, 0.2)")
    initial_capital: SeriesColor = SeriesColor(border="#6c757d", background="rgba(108, 117, 125, 0.1)")

    pie_colors: Tuple[str, str, str] = ("#0088FE", "#00C49F", "#FFBB28")
    pie_hover_colors: Tuple[str, str, str] = ("#0077DD", "#00B36F", "#FFA726")


DEFAULT_STYLE = ChartStyle()


def format_currency(value: float, symbol: str = "$") -> str:
    """Fixed two-decimal amount with a currency prefix; NaN/inf show as zero."""
    if value is None or not math.isfinite(value):
        value = 0.0
    return f"{symbol}{value:.2f}"


def _line(label: str, data: List[float], color: SeriesColor, style: ChartStyle) -> Dict:
    return {
        "label": label,
        "data": data,
        "borderColor": color.border,
        "backgroundColor": color.background,
        "fill": style.fill,
        "tension": style.tension,
    }


def investment_chart(series: InvestmentSeries, style: ChartStyle = DEFAULT_STYLE) -> Dict:
    """Line chart of balance, principal and interest by calendar year."""
    return {
        "type": "line",
        "currency": style.currency_symbol,
        "labels": [str(point.calendar_year) for point in series],
        "datasets": [
            _line("Total Balance", [p.balance for p in series], style.balance, style),
            _line("Total Principal", [p.principal for p in series], style.principal, style),
            _line("Total Interest", [p.interest for p in series], style.interest, style),
        ],
    }


def mortgage_chart(breakdown: MortgageBreakdown, style: ChartStyle = DEFAULT_STYLE) -> Dict:
    """Pie chart of the monthly payment split."""
    return {
        "type": "pie",
        "currency": style.currency_symbol,
        "labels": ["Principal + Interest", "Taxes", "Insurance"],
        "datasets": [
            {
                "data": [
                    breakdown.monthly_principal_and_interest,
                    breakdown.monthly_tax,
                    breakdown.monthly_insurance,
                ],
                "backgroundColor": list(style.pie_colors),
                "hoverBackgroundColor": list(style.pie_hover_colors),
            }
        ],
    }


def year_label(year: int) -> str:
    return f"{year} year" if year == 1 else f"{year} years"


def inflation_chart(
    series: InflationSeries,
    style: ChartStyle = DEFAULT_STYLE,
    include_initial: bool = False,
) -> Dict:
    """
    Line chart of purchasing power over time.

    With `include_initial`, a flat "Initial Capital" line at the year-0 value
    is drawn first for comparison.
    """
    datasets = []
    if include_initial and series:
        initial = series[0].adjusted_value
        datasets.append(
            _line("Initial Capital", [initial] * len(series), style.initial_capital, style)
        )
    datasets.append(
        _line(
            "Adjusted Value (Inflation)",
            [p.adjusted_value for p in series],
            style.adjusted_value,
            style,
        )
    )
    return {
        "type": "line",
        "currency": style.currency_symbol,
        "labels": [year_label(p.year) for p in series],
        "datasets": datasets,
    }


def style_for_currency(symbol: Optional[str]) -> ChartStyle:
    """Default style with a different currency symbol."""
    if not symbol or symbol == DEFAULT_STYLE.currency_symbol:
        return DEFAULT_STYLE
    return DEFAULT_STYLE.model_copy(update={"currency_symbol": symbol})
