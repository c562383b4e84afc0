"""Payment date arithmetic.

Payment dates advance by ``12 / payments_per_year`` months from the previous
payment date. Month arithmetic keeps the day of month and clamps it to the
last day of the target month when that day does not exist (Jan 31 + 1M is
Feb 28/29). Clamping is applied per step, so a schedule threaded from Jan 31
continues on the 28th/29th after February. Frequencies that do not divide the
year into whole months are the one exception and step by whole days.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta

from amortix.core.types import MONTHS_PER_YEAR

DAYS_PER_YEAR = 365


def months_per_payment(payments_per_year: int) -> float:
    """Length of one payment period in months.

    Example:
        >>> months_per_payment(4)
        3.0
    """
    return MONTHS_PER_YEAR / payments_per_year


def add_months(dt: date, months: int) -> date:
    """Add a whole number of calendar months to a date.

    Args:
        dt: Starting date
        months: Months to add (may be negative)

    Returns:
        New date; the day is clamped to the end of the target month

    Example:
        >>> add_months(date(2024, 1, 31), 1)
        datetime.date(2024, 2, 29)
    """
    total_months = (dt.year * 12 + dt.month - 1) + months
    new_year = total_months // 12
    new_month = (total_months % 12) + 1
    last_day = calendar.monthrange(new_year, new_month)[1]
    return date(new_year, new_month, min(dt.day, last_day))


def advance_payment_date(dt: date, payments_per_year: int) -> date:
    """Return the payment date one period after ``dt``.

    Args:
        dt: Current payment date (not modified)
        payments_per_year: Payment frequency

    Returns:
        The next payment date, ``12 / payments_per_year`` calendar months
        after ``dt``.

    Note:
        The months rule only covers frequencies that divide the year into
        whole months. Other frequencies (e.g. 5, 26 or 52 payments per year)
        do not follow it: they step by ``round(365 / payments_per_year)``
        days instead, so a weekly schedule drifts from the calendar by about
        one day a year.

    Example:
        >>> advance_payment_date(date(2024, 1, 15), 12)
        datetime.date(2024, 2, 15)
        >>> advance_payment_date(date(2024, 1, 15), 52)
        datetime.date(2024, 1, 22)
    """
    step = months_per_payment(payments_per_year)
    if float(step).is_integer():
        return add_months(dt, int(step))
    return dt + timedelta(days=round(DAYS_PER_YEAR / payments_per_year))
