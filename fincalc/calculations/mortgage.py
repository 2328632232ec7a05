"""
Mortgage Payment Calculations

Splits a monthly housing payment into principal and interest, property tax
and insurance, and builds a yearly amortization schedule. The level payment
matches Excel's PMT() function.
"""

import logging
import math
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from fincalc.calculations.errors import InvalidParameter
from fincalc.calculations.models import AmortizationRow, MortgageBreakdown, MortgageParams
from fincalc.calculations.validation import require_finite, require_non_negative

logger = logging.getLogger(__name__)


def calculate_payment(principal: float, monthly_rate: float, total_payments: int) -> float:
    """
    Calculate the level monthly payment of a fully amortizing loan.

    Args:
        principal: Loan amount
        monthly_rate: Periodic rate as decimal (annual percent / 100 / 12)
        total_payments: Number of monthly payments

    Returns:
        Monthly payment amount (positive number)
    """
    if principal <= 0:
        return 0.0

    if monthly_rate == 0:
        return principal / total_payments

    # Discounting form: (1 + r) ** -n shrinks toward 0 and cannot overflow.
    discount = 1 - (1 + monthly_rate) ** -total_payments
    if discount == 0:
        return principal / total_payments
    return principal * monthly_rate / discount


def _validate(params: MortgageParams) -> None:
    home_price = require_non_negative("home_price", params.home_price)
    down_payment = require_non_negative("down_payment", params.down_payment)
    if down_payment > home_price:
        raise InvalidParameter("down_payment", "down_payment must not exceed home_price")

    term = require_finite("loan_term_years", params.loan_term_years)
    if term <= 0 or term != int(term):
        raise InvalidParameter("loan_term_years", "loan_term_years must be a positive integer")

    require_non_negative("annual_interest_rate_percent", params.annual_interest_rate_percent)
    require_non_negative("property_tax_rate_percent", params.property_tax_rate_percent)
    require_non_negative("insurance_rate_percent", params.insurance_rate_percent)


def _require_finite_result(field: str, value: float) -> float:
    if not math.isfinite(value):
        raise InvalidParameter(field, "is too large to compute a payment")
    return value


def mortgage_breakdown(params: MortgageParams) -> MortgageBreakdown:
    """
    Break the monthly housing payment into its three parts.

    Tax and insurance are annual percentages of the home price spread over
    twelve months.

    Raises:
        InvalidParameter: If the term is not a positive whole number of years,
            the down payment exceeds the price, or any amount or rate is
            negative.
    """
    _validate(params)

    loan_amount = params.home_price - params.down_payment
    monthly_rate = params.annual_interest_rate_percent / 100 / 12
    total_payments = int(params.loan_term_years) * 12

    principal_and_interest = _require_finite_result(
        "annual_interest_rate_percent",
        calculate_payment(loan_amount, monthly_rate, total_payments),
    )
    monthly_tax = _require_finite_result(
        "property_tax_rate_percent",
        params.home_price * (params.property_tax_rate_percent / 100) / 12,
    )
    monthly_insurance = _require_finite_result(
        "insurance_rate_percent",
        params.home_price * (params.insurance_rate_percent / 100) / 12,
    )

    breakdown = MortgageBreakdown(
        loan_amount=loan_amount,
        total_payments=total_payments,
        monthly_principal_and_interest=principal_and_interest,
        monthly_tax=monthly_tax,
        monthly_insurance=monthly_insurance,
    )
    logger.debug(
        f"Mortgage of {loan_amount:.2f} over {total_payments} payments: "
        f"{breakdown.monthly_total:.2f}/month"
    )
    return breakdown


def amortization_schedule(
    params: MortgageParams, start_date: Optional[date] = None
) -> List[AmortizationRow]:
    """
    Generate a yearly amortization schedule.

    Payments are applied month by month and totalled per loan year. The
    final payment clears whatever balance is left, so the schedule always
    ends at zero.

    Args:
        params: Mortgage inputs
        start_date: Date of the first payment (defaults to today)

    Returns:
        One row per loan year
    """
    _validate(params)

    if start_date is None:
        start_date = date.today()

    balance = params.home_price - params.down_payment
    monthly_rate = params.annual_interest_rate_percent / 100 / 12
    term_years = int(params.loan_term_years)
    total_payments = term_years * 12
    payment = calculate_payment(balance, monthly_rate, total_payments)

    schedule = []
    for year in range(1, term_years + 1):
        principal_paid = 0.0
        interest_paid = 0.0

        for month in range(12):
            interest = balance * monthly_rate
            if year == term_years and month == 11:
                principal_pmt = balance
            else:
                principal_pmt = min(payment - interest, balance)

            principal_paid += principal_pmt
            interest_paid += interest
            balance = max(0.0, balance - principal_pmt)

        schedule.append(
            AmortizationRow(
                year=year,
                date=(start_date + relativedelta(years=year - 1)).isoformat(),
                principal_paid=round(principal_paid, 2),
                interest_paid=round(interest_paid, 2),
                ending_balance=round(balance, 2),
            )
        )

    return schedule


def calculate_total_interest(schedule: List[AmortizationRow]) -> float:
    """Calculate total interest paid over the loan term."""
    return sum(row.interest_paid for row in schedule)
