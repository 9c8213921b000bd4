# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import warnings
from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal, localcontext
from enum import Enum

import numpy as np

from . import rates
from .payments import InvalidInput, annuity_factor, validate_inputs

__version__ = "0.1.0"


# =============================================================================
# Amortization Systems
# =============================================================================
#
#   SAC    constant amortization: principal / n repaid every month, interest
#          on the falling balance, so installments decrease.
#   PRICE  constant installment (French system): level annuity payment,
#          principal share grows as interest shrinks.
#   SAM    hybrid: installment is the simple average of the SAC and PRICE
#          installments for the same month; interest is recomputed on the
#          hybrid's own balance.
#
# Every recurrence runs in Decimal at rates.DECIMAL_PRECISION digits inside a
# local context. Values are projected to float only when a Period is built.
# =============================================================================

class AmortizationSystem(Enum):
    """Repayment conventions."""
    SAC = "SAC"
    PRICE = "PRICE"
    SAM = "SAM"


@dataclass(frozen=True)
class Period:
    """One month of a schedule."""
    month: int               # 1-based
    opening_balance: float   # outstanding principal before the payment
    amortization: float      # principal portion
    interest: float          # interest portion
    installment: float       # amortization + interest
    closing_balance: float   # opening_balance - amortization


@dataclass
class ScheduleArrays:
    """Column view of a schedule, one array per Period field."""
    month: np.ndarray
    opening_balance: np.ndarray
    amortization: np.ndarray
    interest: np.ndarray
    installment: np.ndarray
    closing_balance: np.ndarray


@dataclass(frozen=True)
class Schedule:
    """
    Complete amortization schedule for one system.

    periods is in chronological order and has exactly term_months entries.
    total_interest and total_paid are summed at full precision before being
    converted, so they can differ in the last bits from summing the floats
    in periods.
    """
    system: AmortizationSystem
    principal: float
    annual_rate: float
    term_months: int
    monthly_rate: float
    periods: tuple[Period, ...]
    total_interest: float
    total_paid: float

    def __len__(self) -> int:
        return len(self.periods)

    def __iter__(self) -> Iterator[Period]:
        return iter(self.periods)

    def to_arrays(self) -> ScheduleArrays:
        """Return the schedule as numpy columns."""
        return ScheduleArrays(
            month=np.array([p.month for p in self.periods], dtype=int),
            opening_balance=np.array([p.opening_balance for p in self.periods]),
            amortization=np.array([p.amortization for p in self.periods]),
            interest=np.array([p.interest for p in self.periods]),
            installment=np.array([p.installment for p in self.periods]),
            closing_balance=np.array([p.closing_balance for p in self.periods]),
        )


@dataclass(frozen=True)
class _Row:
    month: int
    opening_balance: Decimal
    amortization: Decimal
    interest: Decimal
    installment: Decimal
    closing_balance: Decimal


# =============================================================================
# Recurrences (Decimal, caller sets the context)
# =============================================================================

def _constant_amortization_rows(principal: Decimal, i: Decimal, n: int) -> list[_Row]:
    amortization = principal / n
    balance = principal
    rows = []
    for month in range(1, n + 1):
        interest = balance * i
        closing = balance - amortization
        rows.append(_Row(month, balance, amortization, interest, amortization + interest, closing))
        balance = closing
    return rows


def _constant_installment_rows(principal: Decimal, i: Decimal, n: int) -> list[_Row]:
    if i == 0:
        warnings.warn("annual_rate is zero, returning straight-line amortization")
    installment = principal * annuity_factor(i, n)
    balance = principal
    rows = []
    for month in range(1, n + 1):
        interest = balance * i
        amortization = installment - interest
        closing = balance - amortization
        rows.append(_Row(month, balance, amortization, interest, installment, closing))
        balance = closing
    return rows


def _hybrid_rows(principal: Decimal, i: Decimal, n: int) -> list[_Row]:
    sac_rows = _constant_amortization_rows(principal, i, n)
    price_rows = _constant_installment_rows(principal, i, n)
    balance = principal
    rows = []
    for sac_row, price_row in zip(sac_rows, price_rows):
        installment = (sac_row.installment + price_row.installment) / 2
        # Interest accrues on the hybrid balance; it is not the average of
        # the two sub-schedules' interest.
        interest = balance * i
        amortization = installment - interest
        closing = balance - amortization
        rows.append(_Row(sac_row.month, balance, amortization, interest, installment, closing))
        balance = closing
    return rows


_RECURRENCES = {
    AmortizationSystem.SAC: _constant_amortization_rows,
    AmortizationSystem.PRICE: _constant_installment_rows,
    AmortizationSystem.SAM: _hybrid_rows,
}


def _run(system: AmortizationSystem, principal: float, annual_rate: float, term_months: int) -> Schedule:
    validate_inputs(principal, annual_rate, term_months)
    n = int(term_months)

    with localcontext() as ctx:
        ctx.prec = rates.DECIMAL_PRECISION
        i = rates.monthly_rate(annual_rate)
        rows = _RECURRENCES[system](rates.to_decimal(principal), i, n)
        total_interest = sum((row.interest for row in rows), Decimal(0))
        total_paid = sum((row.installment for row in rows), Decimal(0))

    periods = tuple(
        Period(
            month=row.month,
            opening_balance=float(row.opening_balance),
            amortization=float(row.amortization),
            interest=float(row.interest),
            installment=float(row.installment),
            closing_balance=float(row.closing_balance),
        )
        for row in rows
    )
    return Schedule(
        system=system,
        principal=float(principal),
        annual_rate=float(annual_rate),
        term_months=n,
        monthly_rate=float(i),
        periods=periods,
        total_interest=float(total_interest),
        total_paid=float(total_paid),
    )


# =============================================================================
# Public Entry Points
# =============================================================================

def constant_amortization(principal: float, annual_rate: float, term_months: int) -> Schedule:
    """
    Schedule under the constant-amortization system (SAC).

    Per period:
        amortization = principal / n
        interest     = balance × i
        installment  = amortization + interest
        balance     -= amortization

    Interest and installment decrease month over month.

    Args:
        principal: Loan amount, positive
        annual_rate: Annual rate as decimal fraction (0.12 = 12%), non-negative
        term_months: Number of monthly installments, positive whole number

    Returns:
        Schedule with term_months periods

    Raises:
        InvalidInput: If any input is invalid (see validate_inputs)

    Example:
        >>> s = constant_amortization(100000, 0.12, 60)
        >>> round(s.total_interest, 2)
        28940.82
    """
    return _run(AmortizationSystem.SAC, principal, annual_rate, term_months)


def constant_installment(principal: float, annual_rate: float, term_months: int) -> Schedule:
    """
    Schedule under the constant-installment system (PRICE / French).

    Installment:
        PMT = principal × i(1+i)^n / ((1+i)^n - 1)

    Per period:
        interest     = balance × i
        amortization = PMT - interest
        balance     -= amortization

    The installment is identical in every period; amortization grows.
    A zero rate warns and falls back to PMT = principal / n.

    Args:
        principal: Loan amount, positive
        annual_rate: Annual rate as decimal fraction (0.12 = 12%), non-negative
        term_months: Number of monthly installments, positive whole number

    Returns:
        Schedule with term_months periods

    Raises:
        InvalidInput: If any input is invalid (see validate_inputs)
        Warning: If annual_rate is zero

    Example:
        >>> s = constant_installment(100000, 0.12, 60)
        >>> round(s.total_interest, 2)
        31614.18
    """
    return _run(AmortizationSystem.PRICE, principal, annual_rate, term_months)


def hybrid(principal: float, annual_rate: float, term_months: int) -> Schedule:
    """
    Schedule under the hybrid system (SAM).

    For month k:
        installment  = (SAC installment_k + PRICE installment_k) / 2
        interest     = hybrid balance × i
        amortization = installment - interest
        balance     -= amortization

    Because interest is linear in the balance, the hybrid balance stays the
    average of the SAC and PRICE balances, so its totals fall between theirs.

    Raises:
        InvalidInput: If any input is invalid (see validate_inputs)
        Warning: If annual_rate is zero
    """
    return _run(AmortizationSystem.SAM, principal, annual_rate, term_months)


sac = constant_amortization
price = constant_installment
sam = hybrid


def compute_schedule(
        system: AmortizationSystem | str,
        principal: float,
        annual_rate: float,
        term_months: int
) -> Schedule:
    """Dispatch to the schedule of the given system ("SAC", "PRICE" or "SAM")."""
    return _run(AmortizationSystem(system), principal, annual_rate, term_months)


def run_all_systems(
        principal: float,
        annual_rate: float,
        term_months: int
) -> dict[AmortizationSystem, Schedule | InvalidInput]:
    """
    Run every system on the same inputs.

    An InvalidInput from one system is stored as that system's result instead
    of aborting the batch.

    Returns:
        Mapping from system to its Schedule or the InvalidInput it raised,
        in AmortizationSystem declaration order
    """
    results: dict[AmortizationSystem, Schedule | InvalidInput] = {}
    for system in AmortizationSystem:
        try:
            results[system] = _run(system, principal, annual_rate, term_months)
        except InvalidInput as e:
            results[system] = e
    return results


# =============================================================================
# Comparison
# =============================================================================

def compare_arrays(expected: np.ndarray, actual: np.ndarray,
                   rtol: float = 1e-9, atol: float = 1e-10) -> tuple[bool, float, int]:
    """Compare two arrays element-wise; returns (all_close, max_rel_diff, worst_index)."""
    min_len = min(len(expected), len(actual))
    exp = np.asarray(expected[:min_len], dtype=float)
    act = np.asarray(actual[:min_len], dtype=float)
    if min_len == 0:
        return len(expected) == len(actual), 0.0, 0
    with np.errstate(divide='ignore', invalid='ignore'):
        rel_diff = np.abs(exp - act) / np.maximum(np.abs(exp), atol)
        rel_diff = np.where(np.isfinite(rel_diff), rel_diff, 0.0)
    max_rel_diff = float(np.max(rel_diff))
    worst_index = int(np.argmax(rel_diff))
    all_close = len(expected) == len(actual) and bool(np.allclose(exp, act, rtol=rtol, atol=atol))
    return all_close, max_rel_diff, worst_index


def compare_schedules(expected: Schedule, actual: Schedule,
                      rtol: float = 1e-9, atol: float = 1e-10) -> tuple[bool, float, str, int]:
    """
    Compare two schedules column by column.

    Returns:
        (all_close, max_rel_diff, worst_column, worst_index) where worst_index
        is 0-based (month = worst_index + 1)
    """
    exp_arrays = expected.to_arrays()
    act_arrays = actual.to_arrays()
    all_close = len(expected) == len(actual)
    worst = (0.0, "month", 0)
    for column in ("opening_balance", "amortization", "interest", "installment", "closing_balance"):
        close, rel_diff, index = compare_arrays(
            getattr(exp_arrays, column), getattr(act_arrays, column), rtol=rtol, atol=atol
        )
        all_close = all_close and close
        if rel_diff > worst[0]:
            worst = (rel_diff, column, index)
    return all_close, worst[0], worst[1], worst[2]
