"""
Tests for chart payloads and currency formatting.
"""

import math

from fincalc.calculations.inflation import project_inflation
from fincalc.calculations.investment import project_investment
from fincalc.calculations.mortgage import mortgage_breakdown
from fincalc.charts import (
    ChartStyle,
    DEFAULT_STYLE,
    format_currency,
    inflation_chart,
    investment_chart,
    mortgage_chart,
    style_for_currency,
    year_label,
)


class TestFormatCurrency:
    def test_two_decimals(self):
        assert format_currency(1234.5) == "$1234.50"
        assert format_currency(744.0939) == "$744.09"

    def test_custom_symbol(self):
        assert format_currency(10, symbol="€") == "€10.00"

    def test_non_finite_shows_zero(self):
        assert format_currency(math.nan) == "$0.00"
        assert format_currency(math.inf) == "$0.00"


class TestInvestmentChart:
    def test_datasets(self, investment_params):
        series = project_investment(investment_params)
        chart = investment_chart(series)
        assert chart["type"] == "line"
        assert chart["labels"][0] == "2025"
        assert [d["label"] for d in chart["datasets"]] == [
            "Total Balance", "Total Principal", "Total Interest",
        ]
        for dataset in chart["datasets"]:
            assert len(dataset["data"]) == len(series)
        assert chart["datasets"][0]["borderColor"] == "#28a745"

    def test_explicit_style(self, investment_params):
        style = ChartStyle(fill=False, tension=0)
        chart = investment_chart(project_investment(investment_params), style)
        assert all(d["fill"] is False for d in chart["datasets"])


class TestMortgageChart:
    def test_pie_matches_breakdown(self, mortgage_params):
        breakdown = mortgage_breakdown(mortgage_params)
        chart = mortgage_chart(breakdown)
        assert chart["type"] == "pie"
        assert sum(chart["datasets"][0]["data"]) == breakdown.monthly_total
        assert chart["datasets"][0]["backgroundColor"] == ["#0088FE", "#00C49F", "#FFBB28"]


class TestInflationChart:
    def test_labels(self, inflation_params):
        chart = inflation_chart(project_inflation(inflation_params))
        assert chart["labels"][:3] == ["0 years", "1 year", "2 years"]
        assert len(chart["datasets"]) == 1

    def test_initial_line_is_flat(self, inflation_params):
        chart = inflation_chart(project_inflation(inflation_params), include_initial=True)
        assert set(chart["datasets"][0]["data"]) == {1000}

    def test_year_label(self):
        assert year_label(1) == "1 year"
        assert year_label(0) == "0 years"


class TestStyleForCurrency:
    def test_default_symbol_reuses_default_style(self):
        assert style_for_currency("$") is DEFAULT_STYLE

    def test_other_symbol(self):
        style = style_for_currency("£")
        assert style.currency_symbol == "£"
        assert style.balance == DEFAULT_STYLE.balance

    def test_chart_carries_currency(self, mortgage_params):
        chart = mortgage_chart(mortgage_breakdown(mortgage_params), style_for_currency("£"))
        assert chart["currency"] == "£"
