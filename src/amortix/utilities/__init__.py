"""Utility functions for unit normalization and financial mathematics."""

from amortix.utilities.math import (
    RESIDUAL_EPSILON,
    annuity_payment,
    annuity_payment_vectorized,
    floor_residual,
)
from amortix.utilities.normalization import (
    duration_in_periods,
    duration_in_years,
    normalize_request,
    rate_per_period,
    round_half_up,
    semesters_in_periods,
)

__all__ = [
    # Unit normalization
    "normalize_request",
    "duration_in_years",
    "duration_in_periods",
    "semesters_in_periods",
    "rate_per_period",
    "round_half_up",
    # Financial math
    "RESIDUAL_EPSILON",
    "floor_residual",
    "annuity_payment",
    "annuity_payment_vectorized",
]
