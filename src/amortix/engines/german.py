"""German (linear) amortization: a constant principal portion every regular period."""

from __future__ import annotations

from amortix.core.schedule import NormalizedSchedule, PaymentRow
from amortix.core.types import RepaymentConvention
from amortix.engines.base import PeriodState, ScheduleEngine, phase_length
from amortix.utilities.math import floor_residual


class GermanEngine(ScheduleEngine):
    """Linear schedule: the payment declines as interest falls on a shrinking balance."""

    convention = RepaymentConvention.GERMAN

    def generate(self, schedule: NormalizedSchedule) -> list[PaymentRow]:
        rows, state = self.pre_amortization(schedule)

        n = schedule.regular_periods
        if n <= 0:
            return rows

        rate = schedule.rate_per_period
        principal = schedule.principal / n

        def step(state: PeriodState) -> tuple[PaymentRow, PeriodState]:
            interest = state.balance * rate
            balance = state.balance - principal
            return self.emit(
                state,
                schedule,
                payment=principal + interest,
                interest=interest,
                principal=principal,
                balance=balance,
                remaining=floor_residual(balance),
            )

        regular_rows, _ = self.fold(state, phase_length(n), step)
        rows.extend(regular_rows)
        return rows
