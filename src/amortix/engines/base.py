"""Base class and period fold shared by the schedule engines.

Every engine turns a NormalizedSchedule into an ordered list of PaymentRow.
Rows are produced by folding a step function over the periods of a phase:
a step maps the state after the previous period (period number, running
balance, payment date) to the row for the next period and the new state.
The running state lives only inside one ``generate`` call.

Phase lengths follow an inclusive ``1..count`` loop, so a fractional count
``c`` yields ``floor(c)`` periods and a count below one yields none. The
interest-only phase of a bullet schedule is the exception: it runs up to but
not including ``count`` (``ceil(c) - 1`` periods).
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import ClassVar

from amortix.core.schedule import NormalizedSchedule, PaymentRow
from amortix.core.time import advance_payment_date
from amortix.core.types import RepaymentConvention
from amortix.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PeriodState:
    """State threaded between periods.

    Attributes:
        period: Number of the last emitted period (0 before the first row)
        balance: Outstanding balance after the last emitted period
        payment_date: Date of the last emitted period (the start date before
            the first row)
    """

    period: int
    balance: float
    payment_date: date


Step = Callable[[PeriodState], tuple[PaymentRow, PeriodState]]


def phase_length(count: float) -> int:
    """Number of periods an inclusive ``1..count`` loop runs for.

    Example:
        >>> phase_length(3)
        3
        >>> phase_length(1.5)
        1
        >>> phase_length(-2)
        0
    """
    return max(0, math.floor(count))


def exclusive_phase_length(count: float) -> int:
    """Number of periods an exclusive ``1..<count`` loop runs for.

    Example:
        >>> exclusive_phase_length(3)
        2
        >>> exclusive_phase_length(2.5)
        2
        >>> exclusive_phase_length(0.5)
        0
    """
    return max(0, math.ceil(count) - 1)


class ScheduleEngine(ABC):
    """Abstract recurrence engine for one repayment convention.

    Engines are stateless; one instance can generate any number of
    schedules.
    """

    convention: ClassVar[RepaymentConvention]

    @abstractmethod
    def generate(self, schedule: NormalizedSchedule) -> list[PaymentRow]:
        """Produce the payment rows of a normalized schedule, ordered by period."""

    @staticmethod
    def initial_state(schedule: NormalizedSchedule) -> PeriodState:
        return PeriodState(period=0, balance=schedule.principal, payment_date=schedule.start_date)

    @staticmethod
    def fold(state: PeriodState, length: int, step: Step) -> tuple[list[PaymentRow], PeriodState]:
        """Apply ``step`` ``length`` times starting from ``state``.

        Returns:
            The emitted rows and the state after the last of them
        """
        rows: list[PaymentRow] = []
        for _ in range(length):
            row, state = step(state)
            rows.append(row)
        return rows, state

    @staticmethod
    def emit(
        state: PeriodState,
        schedule: NormalizedSchedule,
        *,
        payment: float,
        interest: float,
        principal: float,
        balance: float,
        remaining: float | None = None,
    ) -> tuple[PaymentRow, PeriodState]:
        """Build the row following ``state`` and the state after it.

        Args:
            state: State after the previous period
            schedule: Schedule being generated (for the payment frequency)
            payment: Total payment of the period
            interest: Interest part of the payment
            principal: Principal part of the payment
            balance: Running balance after the period
            remaining: Balance reported on the row; defaults to ``balance``
        """
        next_date = advance_payment_date(state.payment_date, schedule.payments_per_year)
        row = PaymentRow(
            period=state.period + 1,
            payment_date=next_date,
            payment=payment,
            interest=interest,
            principal=principal,
            remaining=balance if remaining is None else remaining,
        )
        return row, PeriodState(period=row.period, balance=balance, payment_date=next_date)

    def dead_step(self, schedule: NormalizedSchedule) -> Step:
        """Step of the dead phase: nothing is paid and no interest accrues."""

        def step(state: PeriodState) -> tuple[PaymentRow, PeriodState]:
            return self.emit(
                state, schedule, payment=0.0, interest=0.0, principal=0.0, balance=state.balance
            )

        return step

    def grace_step(self, schedule: NormalizedSchedule) -> Step:
        """Step of the grace phase: interest is paid, the balance is unchanged."""

        def step(state: PeriodState) -> tuple[PaymentRow, PeriodState]:
            interest = state.balance * schedule.rate_per_period
            return self.emit(
                state,
                schedule,
                payment=interest,
                interest=interest,
                principal=0.0,
                balance=state.balance,
            )

        return step

    def pre_amortization(
        self, schedule: NormalizedSchedule, *, with_grace: bool = True
    ) -> tuple[list[PaymentRow], PeriodState]:
        """Emit the dead phase and, unless disabled, the grace phase.

        Returns:
            Rows of both phases and the state at the start of the regular phase
        """
        dead_length = phase_length(schedule.dead_periods)
        grace_length = phase_length(schedule.grace_periods) if with_grace else 0

        rows, state = self.fold(self.initial_state(schedule), dead_length, self.dead_step(schedule))
        grace_rows, state = self.fold(state, grace_length, self.grace_step(schedule))
        rows.extend(grace_rows)

        logger.debug(
            "Pre-amortization phases emitted",
            extra={
                "convention": self.convention.value,
                "dead_rows": dead_length,
                "grace_rows": grace_length,
            },
        )
        return rows, state
