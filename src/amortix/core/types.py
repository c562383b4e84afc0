"""Type definitions and enumerations for amortization schedules.

All enumerations inherit from str for JSON serializability and easy comparison
against the raw tags found in loan request records.
"""

from enum import Enum
from typing import TypeAlias

# Type aliases for clarity
Amount: TypeAlias = float  # Monetary amount
Rate: TypeAlias = float  # Rate per period (decimal, e.g., 0.01 for 1%)
Percentage: TypeAlias = float  # Percentage as entered (e.g., 12 for 12%)


class RepaymentConvention(str, Enum):
    """Repayment conventions supported by the schedule engines."""

    FRENCH = "french"  # Level total payment (annuity)
    GERMAN = "german"  # Level principal payment (linear)
    AMERICAN = "american"  # Interest only, principal at the last period (bullet)


class DurationUnit(str, Enum):
    """Units a loan or grace phase duration can be expressed in."""

    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @property
    def per_year(self) -> int:
        """Number of units in one year, used to convert a duration to years."""
        return _UNITS_PER_YEAR[self]


_UNITS_PER_YEAR: dict["DurationUnit", int] = {
    DurationUnit.DAYS: 365,
    DurationUnit.WEEKS: 52,
    DurationUnit.MONTHS: 12,
    DurationUnit.YEARS: 1,
}

# Dead phases are entered in semesters regardless of the duration units.
MONTHS_PER_SEMESTER: int = 6
MONTHS_PER_YEAR: int = 12
