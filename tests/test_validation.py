"""
Unit tests for input validation of the schedule functions.

Each invalid parameter raises InvalidInput naming that parameter, before any
computation, for every amortization system.

Version: 0.1.0
Last Updated: 2026-10-19
Status: Active
"""

import math
import unittest
from decimal import Decimal

import numpy as np

from amortization_systems.payments import InvalidInput, validate_inputs
from amortization_systems.schedules import (
    AmortizationSystem,
    constant_amortization,
    constant_installment,
    hybrid,
    compute_schedule,
)

SYSTEMS = {
    AmortizationSystem.SAC: constant_amortization,
    AmortizationSystem.PRICE: constant_installment,
    AmortizationSystem.SAM: hybrid,
}

# (principal, annual_rate, term_months, expected field)
INVALID_CASES = [
    (0, 0.12, 60, "principal"),
    (-1_000, 0.12, 60, "principal"),
    (math.nan, 0.12, 60, "principal"),
    (math.inf, 0.12, 60, "principal"),
    (100_000, -0.1, 60, "annual_rate"),
    (100_000, math.nan, 60, "annual_rate"),
    (100_000, 0.12, 0, "term_months"),
    (100_000, 0.12, -12, "term_months"),
    (100_000, 0.12, 12.5, "term_months"),
    (100_000, 0.12, None, "term_months"),
    ("100000", 0.12, 60, "principal"),
    (True, 0.12, 60, "principal"),
]


class TestInvalidInput(unittest.TestCase):
    """InvalidInput raised with the offending field for every system."""

    def test_each_invalid_parameter(self):
        for principal, rate, term, field in INVALID_CASES:
            for system, func in SYSTEMS.items():
                with self.subTest(system=system.value, principal=principal, rate=rate, term=term):
                    with self.assertRaises(InvalidInput) as cm:
                        func(principal, rate, term)
                    self.assertEqual(cm.exception.field, field)

    def test_distinct_messages(self):
        messages = set()
        for principal, rate, term in [(0, 0.12, 60), (100_000, -0.1, 60), (100_000, 0.12, 0)]:
            with self.assertRaises(InvalidInput) as cm:
                validate_inputs(principal, rate, term)
            messages.add(str(cm.exception))
        self.assertEqual(messages, {
            "principal must be positive, got 0",
            "annual_rate must be non-negative, got -0.1",
            "term_months must be positive, got 0",
        })

    def test_is_value_error(self):
        with self.assertRaises(ValueError):
            constant_amortization(0, 0.12, 60)

    def test_first_invalid_parameter_wins(self):
        """Checked in order principal, annual_rate, term_months."""
        with self.assertRaises(InvalidInput) as cm:
            hybrid(0, -0.1, 0)
        self.assertEqual(cm.exception.field, "principal")
        with self.assertRaises(InvalidInput) as cm:
            hybrid(100, -0.1, 0)
        self.assertEqual(cm.exception.field, "annual_rate")

    def test_value_attribute(self):
        with self.assertRaises(InvalidInput) as cm:
            compute_schedule("PRICE", 100_000, -0.25, 60)
        self.assertEqual(cm.exception.value, -0.25)


class TestValidInputs(unittest.TestCase):
    """Boundary and alternative numeric types accepted."""

    def test_zero_rate_accepted(self):
        validate_inputs(1, 0.0, 1)

    def test_whole_float_term_accepted(self):
        schedule = constant_amortization(1_200, 0.05, 12.0)
        self.assertEqual(len(schedule), 12)
        self.assertEqual(schedule.term_months, 12)

    def test_numpy_and_decimal_inputs(self):
        expected = constant_amortization(1_200, 0.05, 12)
        self.assertEqual(constant_amortization(np.float64(1_200), np.float64(0.05), np.int64(12)), expected)
        self.assertEqual(constant_amortization(Decimal("1200"), Decimal("0.05"), 12), expected)


if __name__ == '__main__':
    unittest.main()
