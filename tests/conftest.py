"""Pytest configuration and shared fixtures for amortix tests."""

from collections.abc import Callable
from datetime import date
from typing import Any

import pytest

from amortix.core.request import LoanRequest
from amortix.core.schedule import NormalizedSchedule


@pytest.fixture
def make_request() -> Callable[..., LoanRequest]:
    """Factory for loan requests with sensible defaults.

    Defaults describe a 1000 loan at 10% a year, one payment a year, over two
    years, repaid French style from 2025-01-01.
    """

    def _make(**overrides: Any) -> LoanRequest:
        fields: dict[str, Any] = {
            "principal": 1000.0,
            "nominal_annual_rate_percent": 10.0,
            "payments_per_year": 1,
            "duration_value": 2,
            "duration_unit": "years",
            "repayment_convention": "french",
            "start_date": date(2025, 1, 1),
        }
        fields.update(overrides)
        return LoanRequest(**fields)

    return _make


@pytest.fixture
def make_schedule() -> Callable[..., NormalizedSchedule]:
    """Factory for normalized schedules, bypassing unit normalization."""

    def _make(**overrides: Any) -> NormalizedSchedule:
        fields: dict[str, Any] = {
            "principal": 1000.0,
            "total_periods": 2,
            "rate_per_period": 0.10,
            "grace_periods": 0,
            "dead_periods": 0,
            "start_date": date(2025, 1, 1),
            "payments_per_year": 1,
        }
        fields.update(overrides)
        return NormalizedSchedule(**fields)

    return _make


@pytest.fixture
def tolerance() -> dict[str, float]:
    """Numerical tolerances for float comparisons."""
    return {
        "rel": 1e-9,
        "abs": 1e-9,
        "cents": 0.01,
        "float32_rel": 1e-4,
    }
