"""French (annuity) amortization: a level total payment every regular period.

After the dead and grace phases, the level payment is computed with the
annuity formula over the remaining ``n`` periods. Each period pays interest on
the running balance and puts the rest of the payment towards principal, so
the interest share shrinks while the principal share grows.
"""

from __future__ import annotations

from amortix.core.schedule import NormalizedSchedule, PaymentRow
from amortix.core.types import RepaymentConvention
from amortix.engines.base import PeriodState, ScheduleEngine, phase_length
from amortix.utilities.math import annuity_payment, floor_residual


class FrenchEngine(ScheduleEngine):
    """Level-payment schedule.

    Example:
        >>> rows = FrenchEngine().generate(normalized)
        >>> len({round(row.payment, 6) for row in rows})  # no dead/grace phases
        1
    """

    convention = RepaymentConvention.FRENCH

    def generate(self, schedule: NormalizedSchedule) -> list[PaymentRow]:
        rows, state = self.pre_amortization(schedule)

        n = schedule.regular_periods
        rate = schedule.rate_per_period
        payment = annuity_payment(schedule.principal, rate, n)

        def step(state: PeriodState) -> tuple[PaymentRow, PeriodState]:
            interest = state.balance * rate
            principal = payment - interest
            balance = state.balance - principal
            return self.emit(
                state,
                schedule,
                payment=payment,
                interest=interest,
                principal=principal,
                balance=balance,
                remaining=floor_residual(balance),
            )

        regular_rows, _ = self.fold(state, phase_length(n), step)
        rows.extend(regular_rows)
        return rows
