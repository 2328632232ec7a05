"""
Inflation Erosion Projection

Discounts a fixed nominal amount by compounding inflation to show how much
purchasing power it keeps each year.
"""

import logging

import numpy as np

from fincalc.calculations.errors import InvalidParameter
from fincalc.calculations.models import (
    InflationParams,
    InflationPoint,
    InflationSeries,
    InflationSummary,
)
from fincalc.calculations.validation import (
    require_finite,
    require_non_negative,
    round_years,
)

logger = logging.getLogger(__name__)


def discount_factors(annual_inflation_rate_percent: float, years: int) -> np.ndarray:
    """(1 + rate) ** y for every y in 0..years, each evaluated directly."""
    exponents = np.arange(years + 1, dtype=float)
    return np.power(1 + annual_inflation_rate_percent / 100, exponents)


def project_inflation(params: InflationParams) -> InflationSeries:
    """
    Value of `initial_amount` in today's money for each year 0..years.

    Each year is a closed-form evaluation, not a running product, so error
    does not accumulate across the series. Year 0 is exactly the initial
    amount.

    Raises:
        InvalidParameter: If years < 0, the amount is negative, or the rate
            is -100% or lower.
    """
    initial_amount = require_non_negative("initial_amount", params.initial_amount)
    rate = require_finite(
        "annual_inflation_rate_percent", params.annual_inflation_rate_percent
    )
    if rate <= -100:
        raise InvalidParameter(
            "annual_inflation_rate_percent", "must be greater than -100"
        )

    raw_years = require_finite("years", params.years)
    if raw_years < 0:
        raise InvalidParameter("years", "years must not be negative")
    years = round_years("years", raw_years, minimum=0)

    values = initial_amount / discount_factors(rate, years)
    series = [
        InflationPoint(year=year, adjusted_value=float(value))
        for year, value in enumerate(values)
    ]

    logger.debug(
        f"Projected inflation at {rate}% over {years} years: "
        f"{series[-1].adjusted_value:.2f}"
    )
    return series


def summarize_inflation(series: InflationSeries) -> InflationSummary:
    """Final adjusted value and purchasing power lost since year 0."""
    if not series:
        raise ValueError("Cannot summarize an empty projection")
    first, last = series[0], series[-1]
    return InflationSummary(
        years=last.year,
        adjusted_value=last.adjusted_value,
        purchasing_power_lost=first.adjusted_value - last.adjusted_value,
    )
