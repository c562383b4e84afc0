"""Unit tests for payment date arithmetic."""

from datetime import date

import pytest

from amortix.core.time import add_months, advance_payment_date, months_per_payment


class TestMonthsPerPayment:
    """Length of a payment period in months."""

    @pytest.mark.parametrize(
        ("payments_per_year", "months"),
        [(1, 12.0), (2, 6.0), (4, 3.0), (12, 1.0)],
    )
    def test_common_frequencies(self, payments_per_year, months):
        assert months_per_payment(payments_per_year) == months

    def test_zero_frequency_is_not_guarded(self):
        """A zero frequency surfaces as ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            months_per_payment(0)


class TestAddMonths:
    """Calendar month arithmetic."""

    def test_same_day_next_month(self):
        assert add_months(date(2024, 1, 15), 1) == date(2024, 2, 15)

    def test_year_rollover(self):
        assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)

    def test_month_end_clamped_leap_year(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_month_end_clamped_common_year(self):
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)

    def test_negative_months(self):
        assert add_months(date(2024, 3, 31), -1) == date(2024, 2, 29)

    def test_zero_months_is_identity(self):
        assert add_months(date(2024, 5, 17), 0) == date(2024, 5, 17)


class TestAdvancePaymentDate:
    """Advancing by one payment period."""

    def test_monthly(self):
        assert advance_payment_date(date(2024, 1, 15), 12) == date(2024, 2, 15)

    def test_quarterly(self):
        assert advance_payment_date(date(2024, 1, 15), 4) == date(2024, 4, 15)

    def test_semiannual(self):
        assert advance_payment_date(date(2024, 8, 31), 2) == date(2025, 2, 28)

    def test_annual(self):
        assert advance_payment_date(date(2024, 2, 29), 1) == date(2025, 2, 28)

    def test_weekly_steps_in_days(self):
        """52 payments a year do not divide the year into months."""
        assert advance_payment_date(date(2024, 1, 15), 52) == date(2024, 1, 22)

    def test_biweekly_steps_in_days(self):
        assert advance_payment_date(date(2024, 1, 15), 26) == date(2024, 1, 29)

    def test_fractional_month_frequency_steps_in_days(self):
        """Five payments a year would be 2.4 months; 73 days are added instead."""
        assert advance_payment_date(date(2024, 1, 15), 5) == date(2024, 3, 28)

    def test_weekly_drifts_from_calendar(self):
        """52 weekly steps cover 364 days, one short of a common year."""
        current = date(2023, 1, 1)
        for _ in range(52):
            current = advance_payment_date(current, 52)
        assert current == date(2023, 12, 31)

    def test_input_not_modified(self):
        start = date(2024, 1, 15)
        advance_payment_date(start, 12)
        assert start == date(2024, 1, 15)

    def test_clamping_carries_forward(self):
        """Once clamped to the 29th, later dates stay on the 29th."""
        first = advance_payment_date(date(2024, 1, 31), 12)
        second = advance_payment_date(first, 12)
        assert first == date(2024, 2, 29)
        assert second == date(2024, 3, 29)
