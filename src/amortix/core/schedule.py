"""Schedule data structures: normalized inputs, payment rows and results.

A NormalizedSchedule is what every engine consumes; a PaymentRow is one line
of the amortization table; an AmortizationSchedule bundles the rows with the
request they came from and derives the totals a report needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Any

import pandas as pd

from amortix.core.types import Amount, Rate

if TYPE_CHECKING:
    from amortix.core.request import LoanRequest

ROW_COLUMNS = ["period", "payment_date", "payment", "interest", "principal", "remaining"]


@dataclass(frozen=True)
class NormalizedSchedule:
    """Loan parameters expressed in payment periods.

    Attributes:
        principal: Amount borrowed
        total_periods: Number of payment periods over the whole loan
        rate_per_period: Nominal annual rate / 100 / payments per year
        grace_periods: Interest-only periods
        dead_periods: Non-accruing periods. Converted from semesters and not
            rounded, so it can be fractional.
        start_date: Anchor date of the schedule
        payments_per_year: Payment frequency

    Note:
        ``total_periods >= grace_periods + dead_periods`` is not enforced.
        When it does not hold the regular phase is empty.
    """

    principal: Amount
    total_periods: int
    rate_per_period: Rate
    grace_periods: int
    dead_periods: float
    start_date: date
    payments_per_year: int

    @property
    def regular_periods(self) -> float:
        """Length of the amortizing phase (may be zero, negative or fractional)."""
        return self.total_periods - self.grace_periods - self.dead_periods


@dataclass(frozen=True)
class PaymentRow:
    """One period of an amortization table.

    ``payment == interest + principal`` holds for every row except dead-phase
    rows, which are all zero. ``remaining`` is the balance right after this
    row's principal is applied.
    """

    period: int
    payment_date: date
    payment: Amount
    interest: Amount
    principal: Amount
    remaining: Amount

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period,
            "payment_date": self.payment_date,
            "payment": self.payment,
            "interest": self.interest,
            "principal": self.principal,
            "remaining": self.remaining,
        }


@dataclass
class AmortizationSchedule:
    """A computed amortization table together with its inputs.

    This is what a report renderer consumes: the rows, the original request
    and the totals derived from the rows. Values are never rounded here;
    rounding to cents is a rendering concern.

    Attributes:
        request: The loan request the table was computed from
        normalized: The request expressed in payment periods
        rows: Payment rows ordered by period
        metadata: Free-form information about the computation

    Example:
        >>> schedule = build_amortization_schedule(request)
        >>> schedule.total_interest()
        >>> df = schedule.to_dataframe()
    """

    request: LoanRequest
    normalized: NormalizedSchedule
    rows: list[PaymentRow]
    metadata: dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.rows)

    def total_interest(self) -> float:
        """Sum of the interest column."""
        return sum(row.interest for row in self.rows)

    def total_payment(self) -> float:
        """Sum of the payment column (total cost of the loan)."""
        return sum(row.payment for row in self.rows)

    def total_principal(self) -> float:
        """Sum of the principal column."""
        return sum(row.principal for row in self.rows)

    def final_balance(self) -> float:
        """Balance left after the last row; the principal if there are no rows."""
        if not self.rows:
            return self.normalized.principal
        return self.rows[-1].remaining

    def to_dataframe(self) -> pd.DataFrame:
        """Convert the rows to a pandas DataFrame.

        Returns:
            DataFrame with columns period, payment_date, payment, interest,
            principal, remaining. Empty (with those columns) when there are
            no rows.
        """
        if not self.rows:
            return pd.DataFrame(columns=ROW_COLUMNS)
        return pd.DataFrame([row.to_dict() for row in self.rows], columns=ROW_COLUMNS)

    def summary(self) -> dict[str, Any]:
        """Summary block of the loan: inputs and derived totals."""
        return {
            "principal": self.request.principal,
            "nominal_annual_rate_percent": self.request.nominal_annual_rate_percent,
            "duration": f"{self.request.duration_value:g} {self.request.duration_unit.value}",
            "repayment_convention": self.request.repayment_convention,
            "periods": len(self.rows),
            "total_interest": self.total_interest(),
            "total_payment": self.total_payment(),
        }
