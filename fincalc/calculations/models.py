"""
Value records passed into and returned from the projection engine.

Records are frozen: each computation builds fresh ones and nothing is
mutated after it is returned.
"""

import enum
from dataclasses import dataclass
from typing import List, Optional


class Frequency(str, enum.Enum):
    """How often contributions are made or interest is compounded."""
    monthly = "Monthly"
    annually = "Annually"

    @property
    def periods_per_year(self) -> int:
        return 12 if self is Frequency.monthly else 1


@dataclass(frozen=True)
class InvestmentParams:
    initial_deposit: float
    contribution: float
    contribution_frequency: Frequency
    years: float
    annual_rate_percent: float
    compound_frequency: Frequency
    start_year: Optional[int] = None


@dataclass(frozen=True)
class InvestmentPoint:
    """Balance at the end of one simulated year."""
    year: int
    calendar_year: int
    balance: float
    principal: float
    interest: float


@dataclass(frozen=True)
class InvestmentSummary:
    final_balance: float
    total_principal: float
    total_interest: float


@dataclass(frozen=True)
class MortgageParams:
    home_price: float
    down_payment: float
    loan_term_years: int
    annual_interest_rate_percent: float
    property_tax_rate_percent: float = 0.0
    insurance_rate_percent: float = 0.0


@dataclass(frozen=True)
class MortgageBreakdown:
    loan_amount: float
    total_payments: int
    monthly_principal_and_interest: float
    monthly_tax: float
    monthly_insurance: float

    @property
    def monthly_total(self) -> float:
        return (
            self.monthly_principal_and_interest
            + self.monthly_tax
            + self.monthly_insurance
        )


@dataclass(frozen=True)
class AmortizationRow:
    """Principal and interest paid during one loan year."""
    year: int
    date: str
    principal_paid: float
    interest_paid: float
    ending_balance: float


@dataclass(frozen=True)
class InflationParams:
    initial_amount: float
    annual_inflation_rate_percent: float
    years: float


@dataclass(frozen=True)
class InflationPoint:
    year: int
    adjusted_value: float


@dataclass(frozen=True)
class InflationSummary:
    years: int
    adjusted_value: float
    purchasing_power_lost: float


InvestmentSeries = List[InvestmentPoint]
InflationSeries = List[InflationPoint]
