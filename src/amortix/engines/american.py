"""American (bullet) amortization: interest only, principal repaid in the last period.

Every period before the last is already interest-only, so a grace phase has
no distinguishable effect here and the grace period count is ignored. The
dead phase still applies.

When ``total_periods - dead_periods <= 0`` no bullet row is produced and the
schedule ends with the principal outstanding.
"""

from __future__ import annotations

from amortix.core.schedule import NormalizedSchedule, PaymentRow
from amortix.core.types import RepaymentConvention
from amortix.engines.base import PeriodState, ScheduleEngine, exclusive_phase_length


class AmericanEngine(ScheduleEngine):
    """Bullet schedule with a constant interest payment."""

    convention = RepaymentConvention.AMERICAN

    def generate(self, schedule: NormalizedSchedule) -> list[PaymentRow]:
        rows, state = self.pre_amortization(schedule, with_grace=False)

        principal = schedule.principal
        interest = principal * schedule.rate_per_period
        remaining_periods = schedule.total_periods - schedule.dead_periods

        def interest_only(state: PeriodState) -> tuple[PaymentRow, PeriodState]:
            return self.emit(
                state,
                schedule,
                payment=interest,
                interest=interest,
                principal=0.0,
                balance=principal,
            )

        interest_rows, state = self.fold(
            state, exclusive_phase_length(remaining_periods), interest_only
        )
        rows.extend(interest_rows)

        if remaining_periods > 0:
            bullet, _ = self.emit(
                state,
                schedule,
                payment=interest + principal,
                interest=interest,
                principal=principal,
                balance=0.0,
            )
            rows.append(bullet)
        return rows
