"""
Calculator API endpoints.

Request models are the parse boundary: raw form values (numbers or numeric
strings) are parsed once here into typed engine parameters. Responses carry
the numeric series, the summary figures and a ready-to-render chart payload.
"""

import logging
from dataclasses import asdict
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from fincalc.calculations import inflation, investment, mortgage
from fincalc.calculations.errors import InvalidParameter
from fincalc.calculations.validation import round_years
from fincalc.calculations.models import (
    Frequency,
    InflationParams,
    InvestmentParams,
    MortgageParams,
)
from fincalc.charts import (
    format_currency,
    inflation_chart,
    investment_chart,
    mortgage_chart,
    style_for_currency,
)
from fincalc.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _reject(error: InvalidParameter) -> HTTPException:
    logger.info(f"Rejected calculator input: {error}")
    return HTTPException(
        status_code=400,
        detail={"field": error.field, "message": error.message},
    )


def _check_years(years: float) -> None:
    max_years = get_settings().max_years
    if round_years("years", years, minimum=0) > max_years:
        raise InvalidParameter("years", f"years must not exceed {max_years}")


class InvestmentInput(BaseModel):
    """Input for the investment growth calculator."""

    initial_deposit: float = 4000
    contribution: float = 100
    contribution_frequency: Frequency = Frequency.monthly
    years: float = 30
    annual_rate_percent: float = 6
    compound_frequency: Frequency = Frequency.annually
    start_year: Optional[int] = None

    def to_params(self) -> InvestmentParams:
        return InvestmentParams(**self.model_dump())


class InvestmentSummaryOut(BaseModel):
    final_balance: float
    total_principal: float
    total_interest: float
    formatted: dict


class InvestmentResponse(BaseModel):
    summary: InvestmentSummaryOut
    series: List[dict]
    chart: dict


@router.post("/investment", response_model=InvestmentResponse)
async def calculate_investment(inputs: InvestmentInput):
    """Project investment growth year by year."""
    settings = get_settings()
    try:
        _check_years(inputs.years)
        series = investment.project_investment(inputs.to_params())
    except InvalidParameter as e:
        raise _reject(e)

    summary = investment.summarize_investment(series)
    symbol = settings.currency_symbol

    return InvestmentResponse(
        summary=InvestmentSummaryOut(
            **asdict(summary),
            formatted={
                "total_balance": format_currency(summary.final_balance, symbol),
                "total_interest": format_currency(summary.total_interest, symbol),
                "total_principal": format_currency(summary.total_principal, symbol),
            },
        ),
        series=[asdict(point) for point in series],
        chart=investment_chart(series, style_for_currency(symbol)),
    )


class MortgageInput(BaseModel):
    """Input for the housing payment calculator."""

    home_price: float = 300000
    down_payment: float = 60000
    loan_term_years: int = 30
    annual_interest_rate_percent: float = 5
    property_tax_rate_percent: float = 1.2
    insurance_rate_percent: float = 0.5

    def to_params(self) -> MortgageParams:
        return MortgageParams(**self.model_dump())


class MortgageResponse(BaseModel):
    loan_amount: float
    total_payments: int
    monthly_principal_and_interest: float
    monthly_tax: float
    monthly_insurance: float
    monthly_total: float
    formatted_monthly_total: str
    chart: dict


@router.post("/mortgage", response_model=MortgageResponse)
async def calculate_mortgage(inputs: MortgageInput):
    """Split the monthly housing payment into P&I, taxes and insurance."""
    settings = get_settings()
    try:
        breakdown = mortgage.mortgage_breakdown(inputs.to_params())
    except InvalidParameter as e:
        raise _reject(e)

    return MortgageResponse(
        **asdict(breakdown),
        monthly_total=breakdown.monthly_total,
        formatted_monthly_total=format_currency(
            breakdown.monthly_total, settings.currency_symbol
        ),
        chart=mortgage_chart(breakdown, style_for_currency(settings.currency_symbol)),
    )


class ScheduleInput(MortgageInput):
    start_date: Optional[date] = None


@router.post("/mortgage/schedule")
async def calculate_mortgage_schedule(inputs: ScheduleInput):
    """Generate a yearly amortization schedule for the mortgage."""
    params = MortgageParams(**inputs.model_dump(exclude={"start_date"}))
    try:
        schedule = mortgage.amortization_schedule(params, start_date=inputs.start_date)
    except InvalidParameter as e:
        raise _reject(e)

    return {
        "schedule": [asdict(row) for row in schedule],
        "total_interest": mortgage.calculate_total_interest(schedule),
        "total_principal": sum(row.principal_paid for row in schedule),
    }


class InflationInput(BaseModel):
    """Input for the inflation calculator."""

    initial_amount: float = 1000
    annual_inflation_rate_percent: float = 3
    years: float = 10
    include_initial: bool = False

    def to_params(self) -> InflationParams:
        return InflationParams(
            initial_amount=self.initial_amount,
            annual_inflation_rate_percent=self.annual_inflation_rate_percent,
            years=self.years,
        )


class InflationResponse(BaseModel):
    years: int
    adjusted_value: float
    purchasing_power_lost: float
    formatted_adjusted_value: str
    series: List[dict]
    chart: dict


@router.post("/inflation", response_model=InflationResponse)
async def calculate_inflation(inputs: InflationInput):
    """Project the purchasing power of an amount under inflation."""
    settings = get_settings()
    try:
        _check_years(inputs.years)
        series = inflation.project_inflation(inputs.to_params())
    except InvalidParameter as e:
        raise _reject(e)

    summary = inflation.summarize_inflation(series)
    style = style_for_currency(settings.currency_symbol)

    return InflationResponse(
        **asdict(summary),
        formatted_adjusted_value=format_currency(
            summary.adjusted_value, settings.currency_symbol
        ),
        series=[asdict(point) for point in series],
        chart=inflation_chart(series, style, include_initial=inputs.include_initial),
    )


@router.get("/defaults")
async def calculator_defaults():
    """Default inputs for every calculator form."""
    return {
        "investment": InvestmentInput().model_dump(mode="json"),
        "mortgage": MortgageInput().model_dump(mode="json"),
        "inflation": InflationInput().model_dump(mode="json"),
    }
