"""Loan request input record.

The request is a frozen Pydantic model. Pydantic coerces field types (ISO
strings become dates, "12" becomes 12) but no business validation happens
here: principal, rate and frequency are taken as given, and the repayment
convention stays a raw tag so that the schedule dispatcher is the single
place an unsupported convention is reported.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from amortix.core.types import Amount, DurationUnit, Percentage
from amortix.exceptions import ConfigurationError


class LoanRequest(BaseModel):
    """Everything needed to compute one amortization table.

    Example:
        >>> request = LoanRequest(
        ...     principal=10000.0,
        ...     nominal_annual_rate_percent=6.0,
        ...     payments_per_year=12,
        ...     duration_value=2,
        ...     duration_unit="years",
        ...     repayment_convention="french",
        ...     start_date="2025-01-15",
        ... )
    """

    model_config = ConfigDict(frozen=True)

    principal: Amount = Field(..., description="Amount borrowed")
    nominal_annual_rate_percent: Percentage = Field(
        ..., description="Nominal annual interest rate in percent (12 means 12%)"
    )
    payments_per_year: int = Field(..., description="Payment frequency (1, 2, 4, 12, ...)")
    duration_value: float = Field(..., description="Loan duration, in duration_unit")
    duration_unit: DurationUnit = Field(DurationUnit.YEARS, description="Unit of duration_value")
    grace_period_value: float = Field(0.0, description="Interest-only phase length")
    grace_period_unit: DurationUnit = Field(
        DurationUnit.MONTHS, description="Unit of grace_period_value"
    )
    dead_period_value: float = Field(
        0.0, description="Non-accruing phase length, in semesters (6-month units)"
    )
    repayment_convention: str = Field(
        ..., description="Repayment convention tag: french, german or american"
    )
    start_date: date = Field(..., description="Anchor date; the first payment is one period later")

    @classmethod
    def from_json(cls, source: str | Path) -> LoanRequest:
        """Load a request from a JSON file path or a JSON document.

        Raises:
            ConfigurationError: If the file cannot be read or the document
                does not describe a loan request
        """
        path = Path(source) if isinstance(source, Path) else None
        if path is None and not str(source).lstrip().startswith("{"):
            path = Path(source)

        try:
            text = path.read_text(encoding="utf-8") if path is not None else str(source)
            return cls.model_validate_json(text)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read loan request file: {e}", context={"path": str(path)}
            ) from e
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid loan request",
                context={"errors": e.error_count(), "detail": e.errors()[0]["msg"]},
            ) from e
