"""
Investment Growth Projection

Projects the balance of an account receiving a starting deposit and regular
contributions, compounded once per simulated year.
"""

import logging
import math
from datetime import date

from fincalc.calculations.errors import InvalidParameter
from fincalc.calculations.models import (
    Frequency,
    InvestmentParams,
    InvestmentPoint,
    InvestmentSeries,
    InvestmentSummary,
)
from fincalc.calculations.validation import (
    coerce_frequency,
    require_finite,
    require_non_negative,
    round_years,
)

logger = logging.getLogger(__name__)


def annual_growth_factor(annual_rate_percent: float, compound_frequency: Frequency) -> float:
    """
    Growth applied to the balance over one year.

    The nominal rate is split across `n` compounding periods and compounded
    n times: (1 + rate / (100 * n)) ** n.
    """
    n = compound_frequency.periods_per_year
    return (1 + annual_rate_percent / (100 * n)) ** n


def annual_contribution(contribution: float, contribution_frequency: Frequency) -> float:
    """Total new principal added during one year."""
    if contribution_frequency is Frequency.monthly:
        return contribution * 12
    return contribution


def project_investment(params: InvestmentParams) -> InvestmentSeries:
    """
    Project an investment year by year.

    Each year the whole balance grows by one year of compounding, then that
    year's contributions are added to both balance and principal. Interest
    is always balance minus principal.

    Args:
        params: Investment inputs. `years` may be fractional and is rounded
            to the nearest whole year (at least 1).

    Returns:
        One point per year, `years` points in total.

    Raises:
        InvalidParameter: If years <= 0, the rate is below -100%, the
            deposit or contribution is negative, or the balance would grow
            past the float range.
    """
    initial_deposit = require_non_negative("initial_deposit", params.initial_deposit)
    contribution = require_non_negative("contribution", params.contribution)
    rate = require_finite("annual_rate_percent", params.annual_rate_percent)
    if rate < -100:
        raise InvalidParameter("annual_rate_percent", "must not be below -100")

    raw_years = require_finite("years", params.years)
    if raw_years <= 0:
        raise InvalidParameter("years", "years must be a positive integer")
    years = round_years("years", raw_years, minimum=1)

    contribution_frequency = coerce_frequency(
        "contribution_frequency", params.contribution_frequency
    )
    compound_frequency = coerce_frequency("compound_frequency", params.compound_frequency)
    start_year = params.start_year if params.start_year is not None else date.today().year

    try:
        growth = annual_growth_factor(rate, compound_frequency)
    except OverflowError:
        raise InvalidParameter("annual_rate_percent", "is too large to project")
    if not math.isfinite(growth):
        raise InvalidParameter("annual_rate_percent", "is too large to project")
    added = annual_contribution(contribution, contribution_frequency)

    balance = initial_deposit
    principal = initial_deposit
    series = []

    for i in range(1, years + 1):
        balance = balance * growth
        balance += added
        principal += added
        if not (math.isfinite(balance) and math.isfinite(principal)):
            field = "annual_rate_percent" if growth > 1 else "contribution"
            raise InvalidParameter(field, "projection exceeds the largest representable amount")
        interest = balance - principal

        series.append(
            InvestmentPoint(
                year=i,
                calendar_year=start_year + i - 1,
                balance=balance,
                principal=principal,
                interest=interest,
            )
        )

    logger.debug(
        f"Projected investment over {years} years: final balance {balance:.2f}"
    )
    return series


def summarize_investment(series: InvestmentSeries) -> InvestmentSummary:
    """Final balance, principal and interest of a projection."""
    if not series:
        raise ValueError("Cannot summarize an empty projection")
    last = series[-1]
    return InvestmentSummary(
        final_balance=last.balance,
        total_principal=last.principal,
        total_interest=last.interest,
    )
