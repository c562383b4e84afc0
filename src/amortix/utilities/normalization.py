"""Unit normalization: durations to payment periods.

Loan and grace durations are converted to fractional years with fixed
divisors (days/365, weeks/52, months/12, years/1), multiplied by the payment
frequency and rounded half-up to whole periods. The dead phase is entered in
semesters and converted with ``value * (6 / months_per_payment)`` without
rounding, so it may stay fractional.

No bounds checking is done. Zero or negative durations pass through, and a
zero payment frequency raises ZeroDivisionError.
"""

from __future__ import annotations

import math

from amortix.core.request import LoanRequest
from amortix.core.schedule import NormalizedSchedule
from amortix.core.time import months_per_payment
from amortix.core.types import MONTHS_PER_SEMESTER, DurationUnit


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounded toward positive infinity.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return math.floor(value + 0.5)


def duration_in_years(value: float, unit: DurationUnit) -> float:
    """Express a duration in (fractional) years.

    Example:
        >>> duration_in_years(18, DurationUnit.MONTHS)
        1.5
    """
    return value / unit.per_year


def duration_in_periods(value: float, unit: DurationUnit, payments_per_year: int) -> int:
    """Number of whole payment periods covered by a duration."""
    return round_half_up(duration_in_years(value, unit) * payments_per_year)


def semesters_in_periods(semesters: float, payments_per_year: int) -> float:
    """Number of payment periods in a semester count; not rounded."""
    return semesters * (MONTHS_PER_SEMESTER / months_per_payment(payments_per_year))


def rate_per_period(nominal_annual_rate_percent: float, payments_per_year: int) -> float:
    """Periodic rate from a nominal annual percentage."""
    return nominal_annual_rate_percent / 100 / payments_per_year


def normalize_request(request: LoanRequest) -> NormalizedSchedule:
    """Express a loan request in payment periods.

    Args:
        request: Loan request as entered

    Returns:
        NormalizedSchedule with total, grace and dead period counts and the
        rate per period

    Example:
        >>> normalized = normalize_request(request)  # 2 years, monthly
        >>> normalized.total_periods
        24
    """
    ppy = request.payments_per_year
    return NormalizedSchedule(
        principal=request.principal,
        total_periods=duration_in_periods(request.duration_value, request.duration_unit, ppy),
        rate_per_period=rate_per_period(request.nominal_annual_rate_percent, ppy),
        grace_periods=duration_in_periods(
            request.grace_period_value, request.grace_period_unit, ppy
        ),
        dead_periods=semesters_in_periods(request.dead_period_value, ppy),
        start_date=request.start_date,
        payments_per_year=ppy,
    )
