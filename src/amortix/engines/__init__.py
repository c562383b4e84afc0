"""Schedule engines and the repayment convention dispatcher.

This module provides:
- The ScheduleEngine base class and the French, German and American engines
- An engine registry keyed by repayment convention tag
- compute_amortization_schedule, the single entry point of the core

Example:
    >>> from amortix.core import LoanRequest
    >>> from amortix.engines import compute_amortization_schedule
    >>>
    >>> request = LoanRequest(
    ...     principal=1200.0,
    ...     nominal_annual_rate_percent=12.0,
    ...     payments_per_year=1,
    ...     duration_value=1,
    ...     duration_unit="years",
    ...     repayment_convention="french",
    ...     start_date="2025-01-01",
    ... )
    >>> rows = compute_amortization_schedule(request)
    >>> len(rows)
    1
"""

from amortix.core.request import LoanRequest
from amortix.core.schedule import AmortizationSchedule, PaymentRow
from amortix.core.types import RepaymentConvention
from amortix.engines.american import AmericanEngine
from amortix.engines.base import (
    PeriodState,
    ScheduleEngine,
    exclusive_phase_length,
    phase_length,
)
from amortix.engines.batch import quote_level_payments
from amortix.engines.french import FrenchEngine
from amortix.engines.german import GermanEngine
from amortix.exceptions import ConventionError, UnsupportedConventionError
from amortix.logging_config import get_logger
from amortix.utilities.normalization import normalize_request

logger = get_logger(__name__)

# Engine Registry
# Maps repayment convention tags (as found in loan requests) to engine classes
ENGINE_REGISTRY: dict[str, type[ScheduleEngine]] = {
    RepaymentConvention.FRENCH.value: FrenchEngine,
    RepaymentConvention.GERMAN.value: GermanEngine,
    RepaymentConvention.AMERICAN.value: AmericanEngine,
}


def register_engine(convention: str, engine_class: type[ScheduleEngine]) -> None:
    """Register an engine for a new repayment convention tag.

    Args:
        convention: Convention tag as it appears in loan requests
        engine_class: Engine implementation (must extend ScheduleEngine)

    Raises:
        TypeError: If engine_class doesn't extend ScheduleEngine
        ConventionError: If the tag is already registered

    Example:
        >>> class BalloonEngine(ScheduleEngine):
        ...     def generate(self, schedule):
        ...         ...
        >>> register_engine("balloon", BalloonEngine)
    """
    if not (isinstance(engine_class, type) and issubclass(engine_class, ScheduleEngine)):
        raise TypeError(f"Engine class must extend ScheduleEngine, got {engine_class!r}")

    if convention in ENGINE_REGISTRY:
        raise ConventionError(
            f"Repayment convention {convention} is already registered "
            f"with {ENGINE_REGISTRY[convention].__name__}",
            context={"convention": convention},
        )

    ENGINE_REGISTRY[convention] = engine_class


def get_available_conventions() -> list[str]:
    """Tags of all registered repayment conventions."""
    return list(ENGINE_REGISTRY)


def get_engine(convention: str) -> ScheduleEngine:
    """Instantiate the engine for a repayment convention tag.

    Raises:
        UnsupportedConventionError: If no engine is registered for the tag
    """
    engine_class = ENGINE_REGISTRY.get(convention)
    if engine_class is None:
        supported = ", ".join(get_available_conventions())
        logger.warning("Unsupported repayment convention %r", convention)
        raise UnsupportedConventionError(
            f"Unknown repayment convention: {convention}",
            context={"convention": convention, "supported": supported},
        )
    return engine_class()


def compute_amortization_schedule(request: LoanRequest) -> list[PaymentRow]:
    """Compute the amortization table of a loan request.

    Args:
        request: Loan request

    Returns:
        Payment rows ordered by period

    Raises:
        UnsupportedConventionError: If the repayment convention is unknown.
            Raised before any row is computed.
    """
    engine = get_engine(request.repayment_convention)
    normalized = normalize_request(request)
    rows = engine.generate(normalized)

    logger.debug(
        "Amortization schedule computed",
        extra={
            "convention": request.repayment_convention,
            "total_periods": normalized.total_periods,
            "grace_periods": normalized.grace_periods,
            "dead_periods": normalized.dead_periods,
            "rows": len(rows),
        },
    )
    return rows


def build_amortization_schedule(request: LoanRequest) -> AmortizationSchedule:
    """Compute the table and bundle it with its request and normalized inputs.

    Raises:
        UnsupportedConventionError: If the repayment convention is unknown
    """
    rows = compute_amortization_schedule(request)
    return AmortizationSchedule(
        request=request,
        normalized=normalize_request(request),
        rows=rows,
        metadata={"convention": request.repayment_convention},
    )


__all__ = [
    # Engines
    "ScheduleEngine",
    "PeriodState",
    "phase_length",
    "exclusive_phase_length",
    "FrenchEngine",
    "GermanEngine",
    "AmericanEngine",
    # Registry and dispatch
    "ENGINE_REGISTRY",
    "register_engine",
    "get_engine",
    "get_available_conventions",
    "compute_amortization_schedule",
    "build_amortization_schedule",
    # Batch quotes
    "quote_level_payments",
]
