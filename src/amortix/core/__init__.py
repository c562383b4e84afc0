"""Core type definitions and data structures for amortization schedules.

This module provides the loan request record, the schedule data structures
and the payment date arithmetic used throughout the amortix package.
"""

from amortix.core.request import LoanRequest
from amortix.core.schedule import (
    ROW_COLUMNS,
    AmortizationSchedule,
    NormalizedSchedule,
    PaymentRow,
)
from amortix.core.time import add_months, advance_payment_date, months_per_payment
from amortix.core.types import (
    Amount,
    DurationUnit,
    Percentage,
    Rate,
    RepaymentConvention,
)

__all__ = [
    # Type aliases
    "Amount",
    "Rate",
    "Percentage",
    # Enumerations
    "RepaymentConvention",
    "DurationUnit",
    # Date arithmetic
    "add_months",
    "advance_payment_date",
    "months_per_payment",
    # Input record
    "LoanRequest",
    # Schedule structures
    "NormalizedSchedule",
    "PaymentRow",
    "AmortizationSchedule",
    "ROW_COLUMNS",
]
