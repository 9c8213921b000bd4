# Requires Python 3.12+
"""
Amortization Systems: loan schedules under SAC, PRICE and SAM.

SAC: constant amortization. PRICE: constant installment (French system).
SAM: hybrid, averaging the SAC and PRICE installments.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Rate conversion
from amortization_systems.rates import (
    DECIMAL_PRECISION,
    monthly_rate,
    annual_rate,
    monthly_rate_vector,
    annual_rate_vector,
)

# Payments, validation and implied rate
from amortization_systems.payments import (
    InvalidInput,
    validate_inputs,
    annuity_factor,
    constant_installment_payment,
    implied_annual_rate,
)

# Schedules
from amortization_systems.schedules import (
    AmortizationSystem,
    Period,
    Schedule,
    ScheduleArrays,
    constant_amortization,
    constant_installment,
    hybrid,
    sac,
    price,
    sam,
    compute_schedule,
    run_all_systems,
    compare_arrays,
    compare_schedules,
)

# Reference examples
from amortization_systems.examples import (
    ReferenceExample,
    REFERENCE_EXAMPLES,
)

__all__ = [
    "__version__",
    # Rates
    "DECIMAL_PRECISION",
    "monthly_rate",
    "annual_rate",
    "monthly_rate_vector",
    "annual_rate_vector",
    # Payments
    "InvalidInput",
    "validate_inputs",
    "annuity_factor",
    "constant_installment_payment",
    "implied_annual_rate",
    # Schedules
    "AmortizationSystem",
    "Period",
    "Schedule",
    "ScheduleArrays",
    "constant_amortization",
    "constant_installment",
    "hybrid",
    "sac",
    "price",
    "sam",
    "compute_schedule",
    "run_all_systems",
    "compare_arrays",
    "compare_schedules",
    # Examples
    "ReferenceExample",
    "REFERENCE_EXAMPLES",
]
