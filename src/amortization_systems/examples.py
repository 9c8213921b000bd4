"""
Amortization Systems - Reference Examples

Worked loans with known totals for each amortization system, used to verify
the schedule functions. Totals are rounded to cents.

Structure:
  ReferenceExample - loan inputs plus expected (total_interest, total_paid)
                     per AmortizationSystem
  REFERENCE_EXAMPLES - Dict[str, ReferenceExample] keyed by example name
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from .schedules import AmortizationSystem


@dataclass(frozen=True)
class ReferenceExample:
    """A loan and its expected totals (rounded to cents) per system."""
    name: str
    principal: float
    annual_rate: float              # decimal fraction (0.12 = 12%)
    term_months: int
    expected_totals: Dict[AmortizationSystem, Tuple[float, float]] = field(default_factory=dict)
    # (total_interest, total_paid); systems missing from the dict have no
    # published figure and are checked only through the schedule invariants.


# =============================================================================
# 100,000 at 12% p.a. over 60 months
# =============================================================================
# Monthly rate i = 1.12^(1/12) - 1 = 0.0094887929...
#
#   SAC:   interest = i × P × (n + 1) / 2 = i × 100,000 × 30.5
#   PRICE: PMT = P × i × 1.12^5 / (1.12^5 - 1) = 2,193.5696...
#   SAM:   the hybrid balance is the mean of the SAC and PRICE balances, so
#          its interest is the mean of theirs.

FIVE_YEAR_12PCT = ReferenceExample(
    name="100k_12pct_60m",
    principal=100_000.0,
    annual_rate=0.12,
    term_months=60,
    expected_totals={
        AmortizationSystem.SAC: (28_940.82, 128_940.82),
        AmortizationSystem.PRICE: (31_614.18, 131_614.18),
        AmortizationSystem.SAM: (30_277.50, 130_277.50),
    },
)


# =============================================================================
# Zero-rate loan: every system collapses to straight-line repayment
# =============================================================================

ZERO_RATE_12M = ReferenceExample(
    name="12k_0pct_12m",
    principal=12_000.0,
    annual_rate=0.0,
    term_months=12,
    expected_totals={
        AmortizationSystem.SAC: (0.0, 12_000.0),
        AmortizationSystem.PRICE: (0.0, 12_000.0),
        AmortizationSystem.SAM: (0.0, 12_000.0),
    },
)


# =============================================================================
# Single-period loan: principal plus one month of interest
# =============================================================================
# 12.6825...% p.a. is 1% per month: 1.01^12 = 1.126825030131969720661201.

ONE_MONTH_1PCT = ReferenceExample(
    name="1k_1pct_monthly_1m",
    principal=1_000.0,
    annual_rate=0.126825030131969720661201,
    term_months=1,
    expected_totals={
        AmortizationSystem.SAC: (10.0, 1_010.0),
        AmortizationSystem.PRICE: (10.0, 1_010.0),
        AmortizationSystem.SAM: (10.0, 1_010.0),
    },
)


REFERENCE_EXAMPLES: Dict[str, ReferenceExample] = {
    example.name: example
    for example in (FIVE_YEAR_12PCT, ZERO_RATE_12M, ONE_MONTH_1PCT)
}
