# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

from decimal import Decimal, localcontext
from numbers import Integral, Real

import numpy as np

__version__ = "0.1.0"

DECIMAL_PRECISION = 34  # significant digits for every schedule computation
MONTHS_PER_YEAR = 12


# =============================================================================
# Rate Conversion: annual <-> compounding-equivalent monthly
# =============================================================================
#
# The monthly rate is NOT annual / 12. It is the rate which, compounded over
# twelve months, reproduces the annual rate exactly:
#
#     (1 + i)^12 = 1 + annual
#
# Scalar functions work in Decimal (used by the schedule recurrences);
# the *_vector functions work in float64 for grids of rates.
# =============================================================================

def to_decimal(value: float | int | str | Decimal) -> Decimal:
    """Convert a number to Decimal, reading floats through their shortest repr.

    Decimal(0.12) would carry the full binary expansion of the float;
    Decimal(repr(0.12)) is exactly 0.12, which is what the caller typed.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, Integral):
        return Decimal(int(value))
    if isinstance(value, Real):
        return Decimal(repr(float(value)))
    return Decimal(value)


def monthly_rate(annual_rate: float | Decimal) -> Decimal:
    """
    Convert a nominal annual rate to the compounding-equivalent monthly rate.

    Formula:
        i = (1 + annual)^(1/12) - 1

    Args:
        annual_rate: Annual rate as decimal fraction (e.g., 0.12 for 12%)

    Returns:
        Monthly rate as Decimal, rounded to DECIMAL_PRECISION significant digits

    Example:
        >>> round(float(monthly_rate(0.12)), 6)
        0.009489
    """
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        exponent = Decimal(1) / Decimal(MONTHS_PER_YEAR)
        return (to_decimal(annual_rate) + 1) ** exponent - 1


def annual_rate(monthly: float | Decimal) -> Decimal:
    """
    Convert a monthly rate back to the equivalent annual rate.

    Formula:
        annual = (1 + i)^12 - 1

    Inverse of monthly_rate(): annual_rate(monthly_rate(x)) == x to within
    DECIMAL_PRECISION digits.
    """
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return (to_decimal(monthly) + 1) ** MONTHS_PER_YEAR - 1


def monthly_rate_vector(annual_rates: np.ndarray) -> np.ndarray:
    """
    Vectorized annual to monthly conversion. See monthly_rate for details.

    Args:
        annual_rates: Array of annual rates as decimal fractions.
                      Can be any shape (1D vector, 2D grid, etc.).

    Returns:
        Array of monthly rates (float64), same shape as input.
        NaN/inf inputs will produce NaN/inf outputs (natural numpy propagation).
    """
    if not isinstance(annual_rates, np.ndarray):
        annual_rates = np.array(annual_rates, dtype=float)

    return np.power(1.0 + annual_rates, 1.0 / MONTHS_PER_YEAR) - 1.0


def annual_rate_vector(monthly_rates: np.ndarray) -> np.ndarray:
    """Vectorized monthly to annual conversion. See annual_rate for details."""
    if not isinstance(monthly_rates, np.ndarray):
        monthly_rates = np.array(monthly_rates, dtype=float)

    return np.power(1.0 + monthly_rates, float(MONTHS_PER_YEAR)) - 1.0
