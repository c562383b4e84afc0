"""Tests for amortization math: annuity payments and the residual floor."""

from __future__ import annotations

import jax.numpy as jnp
import pytest

from amortix.utilities.math import (
    RESIDUAL_EPSILON,
    annuity_payment,
    annuity_payment_vectorized,
    floor_residual,
)


class TestFloorResidual:
    """Balances below one cent are reported as zero."""

    def test_large_balance_kept(self):
        assert floor_residual(500.0) == 500.0

    def test_positive_residue_floored(self):
        assert floor_residual(0.009) == 0.0

    def test_negative_residue_floored(self):
        assert floor_residual(-1e-9) == 0.0

    def test_threshold_is_exclusive(self):
        assert floor_residual(RESIDUAL_EPSILON) == RESIDUAL_EPSILON

    def test_large_negative_kept(self):
        """Only the magnitude is compared; overpayments above a cent are reported."""
        assert floor_residual(-5.0) == -5.0


class TestAnnuityPayment:
    """Scalar level payment."""

    def test_single_period(self):
        """One period repays principal plus one period of interest."""
        assert annuity_payment(1200.0, 0.12, 1) == pytest.approx(1344.0)

    def test_two_periods(self):
        # 1000 * 0.1 * 1.21 / 0.21
        assert annuity_payment(1000.0, 0.10, 2) == pytest.approx(576.1904761904762)

    def test_monthly_mortgage(self):
        # 100,000 at 5% a year over 12 monthly payments
        assert abs(annuity_payment(100000.0, 0.05 / 12, 12) - 8560.75) < 1.0

    def test_no_periods(self):
        assert annuity_payment(1000.0, 0.10, 0) == 0.0

    def test_negative_periods(self):
        assert annuity_payment(1000.0, 0.10, -3) == 0.0

    def test_zero_rate(self):
        """Zero rate repays the principal in equal parts."""
        assert annuity_payment(1200.0, 0.0, 12) == pytest.approx(100.0)

    def test_fractional_periods(self):
        payment = annuity_payment(1000.0, 0.10, 1.5)
        assert annuity_payment(1000.0, 0.10, 2) < payment < annuity_payment(1000.0, 0.10, 1)

    def test_payment_covers_interest(self):
        assert annuity_payment(1000.0, 0.10, 30) > 1000.0 * 0.10


class TestAnnuityPaymentVectorized:
    """JAX version of the level payment."""

    def test_matches_scalar(self, tolerance):
        principals = jnp.array([1200.0, 1000.0, 100000.0])
        rates = jnp.array([0.12, 0.10, 0.05 / 12])
        periods = jnp.array([1, 2, 12])

        payments = annuity_payment_vectorized(principals, rates, periods)

        cases = [(1200.0, 0.12, 1), (1000.0, 0.10, 2), (100000.0, 0.05 / 12, 12)]
        for i, (p, r, n) in enumerate(cases):
            assert float(payments[i]) == pytest.approx(
                annuity_payment(p, r, n), rel=tolerance["float32_rel"]
            )

    def test_zero_periods(self):
        payments = annuity_payment_vectorized(
            jnp.array([1000.0, 1000.0]), jnp.array([0.1, 0.1]), jnp.array([0, -2])
        )
        assert float(payments[0]) == 0.0
        assert float(payments[1]) == 0.0

    def test_zero_rate(self):
        payments = annuity_payment_vectorized(jnp.array([1200.0]), jnp.array([0.0]), jnp.array([12]))
        assert float(payments[0]) == pytest.approx(100.0)

    def test_no_nans(self):
        payments = annuity_payment_vectorized(
            jnp.array([1000.0, 1000.0, 1000.0]),
            jnp.array([0.0, 0.1, 0.0]),
            jnp.array([0, 0, 5]),
        )
        assert not bool(jnp.any(jnp.isnan(payments)))
