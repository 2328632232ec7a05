"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from fincalc.main import app
from fincalc.calculations.models import (
    Frequency,
    InflationParams,
    InvestmentParams,
    MortgageParams,
)


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def investment_params():
    """The investment calculator's default form values."""
    return InvestmentParams(
        initial_deposit=4000,
        contribution=100,
        contribution_frequency=Frequency.monthly,
        years=30,
        annual_rate_percent=6,
        compound_frequency=Frequency.annually,
        start_year=2025,
    )


@pytest.fixture
def mortgage_params():
    """The housing calculator's default form values."""
    return MortgageParams(
        home_price=300000,
        down_payment=60000,
        loan_term_years=30,
        annual_interest_rate_percent=5,
        property_tax_rate_percent=1.2,
        insurance_rate_percent=0.5,
    )


@pytest.fixture
def inflation_params():
    """The inflation calculator's default form values."""
    return InflationParams(initial_amount=1000, annual_inflation_rate_percent=3, years=10)
