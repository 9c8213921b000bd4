# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import math
from decimal import Decimal, localcontext
from numbers import Real

from scipy.optimize import brentq

from . import rates

__version__ = "0.1.0"

IMPLIED_RATE_UPPER_BOUND = 10.0  # 1000% p.a., upper end of the solver bracket


# =============================================================================
# Input Validation
# =============================================================================

class InvalidInput(ValueError):
    """
    Raised when a schedule input is outside its domain.

    Attributes:
        field: Name of the offending parameter ("principal", "annual_rate",
               "term_months", or "installment" for the implied rate solver)
        value: The rejected value
    """

    def __init__(self, field: str, value: object, requirement: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} {requirement}, got {value}")


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return False
    return math.isfinite(value)


def validate_inputs(principal: float, annual_rate: float, term_months: int) -> None:
    """
    Check the three schedule inputs, raising on the first invalid one.

    Checked in order principal, annual_rate, term_months.

    Raises:
        InvalidInput: If principal is not a positive finite number
        InvalidInput: If annual_rate is negative or not finite
        InvalidInput: If term_months is not a positive whole number
    """
    if not _is_finite_number(principal) or principal <= 0:
        raise InvalidInput("principal", principal, "must be positive")
    if not _is_finite_number(annual_rate) or annual_rate < 0:
        raise InvalidInput("annual_rate", annual_rate, "must be non-negative")
    if not _is_finite_number(term_months) or term_months <= 0:
        raise InvalidInput("term_months", term_months, "must be positive")
    if term_months != int(term_months):
        raise InvalidInput("term_months", term_months, "must be a whole number of months")


# =============================================================================
# Annuity Factor and Constant Installment
# =============================================================================
#
# The level payment that retires a balance B over n periods at rate i is
#
#     PMT = B × AF(n, i),    AF(n, i) = i(1+i)^n / ((1+i)^n - 1)
#
# AF is the reciprocal of the present value annuity factor
# PVAF(n, i) = [1 - (1+i)^-n] / i. At i = 0 the formula is 0/0; the limit is
# the straight-line factor 1/n.
# =============================================================================

def annuity_factor(monthly_rate: float | Decimal, term_months: int) -> float | Decimal:
    """
    Payment per unit of balance that amortizes the balance to zero over
    term_months level payments at monthly_rate.

    Formula:
        AF = i × (1+i)^n / ((1+i)^n - 1)

    Works on float or Decimal; the result has the type of monthly_rate.
    Zero rate returns the straight-line factor 1/n.

    Args:
        monthly_rate: Monthly rate as decimal fraction
        term_months: Number of level payments (n)

    Returns:
        Annuity factor

    Example:
        >>> round(annuity_factor(0.01, 12), 8)
        0.08884879
    """
    one = type(monthly_rate)(1)
    if monthly_rate == 0:
        return one / term_months
    growth = (one + monthly_rate) ** term_months
    return monthly_rate * growth / (growth - one)


def constant_installment_payment(principal: float, annual_rate: float, term_months: int) -> float:
    """
    Fixed installment of the constant-installment (PRICE) system.

    Args:
        principal: Loan amount, positive
        annual_rate: Annual rate as decimal fraction (0.12 = 12%)
        term_months: Number of monthly installments, positive

    Returns:
        Monthly installment

    Raises:
        InvalidInput: See validate_inputs()
    """
    validate_inputs(principal, annual_rate, term_months)
    with localcontext() as ctx:
        ctx.prec = rates.DECIMAL_PRECISION
        i = rates.monthly_rate(annual_rate)
        return float(rates.to_decimal(principal) * annuity_factor(i, int(term_months)))


# =============================================================================
# Implied Rate
# =============================================================================

def implied_annual_rate(
        principal: float,
        installment: float,
        term_months: int,
        tolerance: float = 1e-12,
        max_iterations: int = 200
) -> float:
    """
    Solve for the annual rate at which the constant-installment payment on
    principal over term_months equals installment.

    The PRICE installment is strictly increasing in the rate, so the root is
    unique when it exists. Uses Brent's method (scipy.optimize.brentq) on the
    bracket [0, IMPLIED_RATE_UPPER_BOUND].

    Args:
        principal: Loan amount, positive
        installment: Observed monthly installment
        term_months: Number of monthly installments, positive
        tolerance: Convergence tolerance on the annual rate
        max_iterations: Maximum iterations for Brent's method

    Returns:
        Annual rate as decimal fraction

    Raises:
        InvalidInput: If principal/term_months are invalid, or installment
                      does not even cover straight-line repayment
        ValueError: If no rate inside the bracket reproduces installment

    Example:
        >>> pmt = constant_installment_payment(100000, 0.12, 60)
        >>> round(implied_annual_rate(100000, pmt, 60), 10)
        0.12
    """
    validate_inputs(principal, 0.0, term_months)
    if not _is_finite_number(installment) or installment <= 0:
        raise InvalidInput("installment", installment, "must be positive")

    principal = float(principal)
    installment = float(installment)
    n = int(term_months)
    straight_line = principal / n
    if math.isclose(installment, straight_line, rel_tol=1e-15):
        return 0.0
    if installment < straight_line:
        raise InvalidInput(
            "installment", installment,
            f"must cover straight-line repayment of {straight_line:.8f}"
        )

    def objective(rate: float) -> float:
        i = float(rates.monthly_rate_vector(rate))
        return principal * annuity_factor(i, n) - installment

    try:
        return brentq(
            objective,
            0.0, IMPLIED_RATE_UPPER_BOUND,
            xtol=tolerance,
            maxiter=max_iterations
        )
    except ValueError as e:
        # brentq raises ValueError if the objective has the same sign at both ends
        raise ValueError(
            f"Could not find annual rate for installment {installment:.8f} "
            f"on principal {principal:.2f} over {n} months. "
            f"Original error: {e}"
        ) from e
