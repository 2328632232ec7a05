"""
Input checks shared by the calculators.

Every check raises InvalidParameter before any computation starts.
"""

import math
from typing import Union

from fincalc.calculations.errors import InvalidParameter
from fincalc.calculations.models import Frequency


def require_finite(field: str, value: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(field, f"must be a number, got {value!r}")
    if not math.isfinite(number):
        raise InvalidParameter(field, "must be a finite number")
    return number


def require_non_negative(field: str, value: float) -> float:
    number = require_finite(field, value)
    if number < 0:
        raise InvalidParameter(field, "must not be negative")
    return number


def round_years(field: str, value: float, minimum: int) -> int:
    """
    Round a year count to the nearest whole year.

    Halves round up (2.5 -> 3). Values below `minimum` after rounding are
    clamped up to it; the caller is responsible for rejecting inputs that
    are out of range before rounding.
    """
    number = require_finite(field, value)
    return max(minimum, int(math.floor(number + 0.5)))


def coerce_frequency(field: str, value: Union[Frequency, str]) -> Frequency:
    if isinstance(value, Frequency):
        return value
    try:
        return Frequency(value)
    except ValueError:
        choices = ", ".join(f.value for f in Frequency)
        raise InvalidParameter(field, f"must be one of {choices}, got {value!r}")
