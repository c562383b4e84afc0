"""Tests for the German (linear) engine."""

from datetime import date

import pytest

from amortix.engines.german import GermanEngine


class TestGermanRegularPhase:
    """Constant principal portion."""

    def test_two_periods(self, make_schedule):
        rows = GermanEngine().generate(make_schedule())

        first, second = rows
        assert (first.interest, first.payment, first.principal, first.remaining) == pytest.approx(
            (100.0, 600.0, 500.0, 500.0)
        )
        assert (
            second.interest,
            second.payment,
            second.principal,
            second.remaining,
        ) == pytest.approx((50.0, 550.0, 500.0, 0.0))
        assert second.remaining == 0.0

    def test_payment_strictly_decreases(self, make_schedule):
        rows = GermanEngine().generate(make_schedule(total_periods=12, rate_per_period=0.01))
        payments = [row.payment for row in rows]
        assert all(later < earlier for earlier, later in zip(payments, payments[1:]))

    def test_constant_principal(self, make_schedule):
        rows = GermanEngine().generate(make_schedule(total_periods=3))
        assert {row.principal for row in rows} == {1000.0 / 3}
        assert rows[-1].remaining == 0.0

    def test_dates(self, make_schedule):
        rows = GermanEngine().generate(make_schedule(payments_per_year=4))
        assert [row.payment_date for row in rows] == [date(2025, 4, 1), date(2025, 7, 1)]


class TestGermanPreAmortization:
    """Dead and grace phases."""

    def test_grace_then_linear(self, make_schedule):
        rows = GermanEngine().generate(make_schedule(total_periods=3, grace_periods=1))

        assert rows[0].payment == pytest.approx(100.0)
        assert rows[0].principal == 0.0
        assert rows[0].remaining == 1000.0
        assert [row.principal for row in rows[1:]] == [500.0, 500.0]
        assert [row.period for row in rows] == [1, 2, 3]
        assert rows[-1].remaining == 0.0

    def test_dead_then_linear(self, make_schedule):
        rows = GermanEngine().generate(make_schedule(total_periods=3, dead_periods=1))

        assert (rows[0].payment, rows[0].interest, rows[0].principal) == (0.0, 0.0, 0.0)
        assert rows[0].remaining == 1000.0
        # Interest did not accrue during the dead phase
        assert rows[1].interest == pytest.approx(100.0)

    def test_no_regular_phase_returns_grace_rows(self, make_schedule):
        rows = GermanEngine().generate(make_schedule(total_periods=2, grace_periods=2))
        assert len(rows) == 2
        assert all(row.principal == 0.0 for row in rows)

    def test_grace_longer_than_loan(self, make_schedule):
        rows = GermanEngine().generate(make_schedule(total_periods=1, grace_periods=2))
        assert len(rows) == 2
        assert rows[-1].remaining == 1000.0

    def test_empty_schedule(self, make_schedule):
        assert GermanEngine().generate(make_schedule(total_periods=0)) == []
