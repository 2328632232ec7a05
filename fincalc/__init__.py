"""
Financial calculators: investment growth, mortgage payments and inflation.
"""

__version__ = "0.1.0"
