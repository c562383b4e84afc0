"""amortix: loan amortization tables.

This package computes repayment schedules for a principal, a nominal annual
rate, a duration and a payment frequency, with optional dead (non-accruing)
and grace (interest-only) phases, under the French (annuity), German (linear)
and American (bullet) repayment conventions.

Basic usage:
    >>> import amortix
    >>> request = amortix.LoanRequest(
    ...     principal=1000.0,
    ...     nominal_annual_rate_percent=10.0,
    ...     payments_per_year=1,
    ...     duration_value=2,
    ...     duration_unit="years",
    ...     repayment_convention="german",
    ...     start_date="2025-01-01",
    ... )
    >>> [row.payment for row in amortix.compute_amortization_schedule(request)]
    [600.0, 550.0]
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from amortix.core import (
    AmortizationSchedule,
    DurationUnit,
    LoanRequest,
    PaymentRow,
    RepaymentConvention,
    advance_payment_date,
)
from amortix.engines import (
    build_amortization_schedule,
    compute_amortization_schedule,
    quote_level_payments,
    register_engine,
)
from amortix.exceptions import (
    AmortixException,
    ConfigurationError,
    ConventionError,
    UnsupportedConventionError,
)
from amortix.logging_config import configure_logging, get_logger

# Public API
__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Inputs and results
    "LoanRequest",
    "DurationUnit",
    "RepaymentConvention",
    "PaymentRow",
    "AmortizationSchedule",
    # Operations
    "compute_amortization_schedule",
    "build_amortization_schedule",
    "quote_level_payments",
    "register_engine",
    "advance_payment_date",
    # Exceptions
    "AmortixException",
    "ConfigurationError",
    "ConventionError",
    "UnsupportedConventionError",
    # Logging
    "configure_logging",
    "get_logger",
]
