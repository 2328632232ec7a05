"""
Financial Projection Engine

Pure calculation modules for the investment, mortgage and inflation
calculators. Nothing here depends on the web layer or on any charting code.
"""

from fincalc.calculations import investment, mortgage, inflation
from fincalc.calculations.errors import InvalidParameter

__all__ = ["investment", "mortgage", "inflation", "InvalidParameter"]
