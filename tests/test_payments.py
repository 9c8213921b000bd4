"""
Unit tests for the annuity factor, the constant installment and the implied
annual rate solver.

Version: 0.1.0
Last Updated: 2026-10-19
Status: Active
"""

import unittest
from decimal import Decimal

from amortization_systems.payments import (
    InvalidInput,
    annuity_factor,
    constant_installment_payment,
    implied_annual_rate,
)
from amortization_systems.schedules import constant_installment
from tests.utilities import generate_random_loans

DECIMAL_PLACES_FOR_ASSERTIONS: int = 10


class TestAnnuityFactor(unittest.TestCase):
    """AF(n, i) = i(1+i)^n / ((1+i)^n - 1)."""

    def test_known_value(self):
        self.assertAlmostEqual(annuity_factor(0.01, 12), 0.0888487887, places=9)

    def test_single_period(self):
        """AF(1, i) = 1 + i."""
        self.assertAlmostEqual(annuity_factor(0.02, 1), 1.02, places=DECIMAL_PLACES_FOR_ASSERTIONS)

    def test_zero_rate_is_straight_line(self):
        self.assertEqual(annuity_factor(0.0, 8), 0.125)
        self.assertEqual(annuity_factor(Decimal(0), 8), Decimal("0.125"))

    def test_decimal_and_float_agree(self):
        for rate in (0.001, 0.0075, 0.02):
            for n in (1, 12, 360):
                with self.subTest(rate=rate, n=n):
                    dec = annuity_factor(Decimal(repr(rate)), n)
                    self.assertIsInstance(dec, Decimal)
                    self.assertAlmostEqual(float(dec), annuity_factor(rate, n), places=12)

    def test_decreasing_in_term(self):
        factors = [annuity_factor(0.01, n) for n in (12, 24, 60, 120, 360)]
        self.assertEqual(factors, sorted(factors, reverse=True))


class TestConstantInstallmentPayment(unittest.TestCase):
    """Closed-form PRICE installment."""

    def test_reference_installment(self):
        self.assertAlmostEqual(constant_installment_payment(100_000, 0.12, 60), 2_193.57, delta=0.005)

    def test_matches_schedule(self):
        for loan in generate_random_loans(10):
            with self.subTest(loan_id=loan.loan_id):
                self.assertEqual(
                    constant_installment_payment(*loan.args),
                    constant_installment(*loan.args).periods[0].installment,
                )

    def test_validates(self):
        with self.assertRaises(InvalidInput) as cm:
            constant_installment_payment(100_000, 0.12, 0)
        self.assertEqual(cm.exception.field, "term_months")


class TestImpliedAnnualRate(unittest.TestCase):
    """Brent's method recovers the rate behind a PRICE installment."""

    def test_round_trip(self):
        for loan in generate_random_loans(20, seed=7):
            with self.subTest(loan_id=loan.loan_id):
                installment = constant_installment_payment(*loan.args)
                rate = implied_annual_rate(loan.principal, installment, loan.term_months)
                self.assertAlmostEqual(rate, loan.annual_rate, places=8)

    def test_straight_line_is_zero_rate(self):
        self.assertEqual(implied_annual_rate(12_000, 1_000, 12), 0.0)

    def test_installment_below_straight_line(self):
        with self.assertRaises(InvalidInput) as cm:
            implied_annual_rate(12_000, 999, 12)
        self.assertEqual(cm.exception.field, "installment")

    def test_non_positive_installment(self):
        for installment in (0, -10.0):
            with self.subTest(installment=installment):
                with self.assertRaises(InvalidInput) as cm:
                    implied_annual_rate(12_000, installment, 12)
                self.assertEqual(cm.exception.field, "installment")

    def test_invalid_loan_terms(self):
        with self.assertRaises(InvalidInput) as cm:
            implied_annual_rate(0, 100, 12)
        self.assertEqual(cm.exception.field, "principal")

    def test_rate_outside_bracket(self):
        """Repaying the full principal every month implies a rate far above 1000%."""
        with self.assertRaises(ValueError) as cm:
            implied_annual_rate(1_000, 1_000, 12)
        self.assertNotIsInstance(cm.exception, InvalidInput)
        self.assertIn("Could not find annual rate", str(cm.exception))


if __name__ == '__main__':
    unittest.main()
