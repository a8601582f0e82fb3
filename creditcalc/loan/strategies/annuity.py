"""Annuity repayment: a constant total installment."""

from __future__ import annotations

import math
from dataclasses import replace
from datetime import date

from creditcalc.conventions.daycount import periods_per_year
from creditcalc.loan.params import LoanParams
from creditcalc.utils.mathutils import round_half_up

from .base import RepaymentState, RepaymentStrategy, ScheduleCalculationError


def period_rate(params: LoanParams) -> float:
    """Nominal rate per repayment period as a decimal."""
    return params.annual_rate / (periods_per_year(params.duration_type) * 10000)


def annuity_payment(amount: int, rate: float, periods: int) -> int:
    """Installment repaying ``amount`` in ``periods`` equal payments at ``rate`` per period.

    >>> annuity_payment(1_000_000, 0.01, 12)
    88849
    """
    if periods <= 0:
        raise ScheduleCalculationError(f"Cannot spread a balance over {periods} periods")
    if rate == 0:
        return round_half_up(amount / periods)
    growth = (1 + rate) ** periods
    coefficient = rate * growth / (growth - 1)
    return round_half_up(coefficient * amount)


def remaining_term(amount: int, installment: float, rate: float) -> int:
    """Periods needed to repay ``amount`` with a fixed ``installment``.

    Solves the annuity identity for the number of periods and rounds the
    fractional result up to a whole period. The result is not clamped; an
    installment exceeding a negative balance gives zero or fewer periods, and
    an installment below the period interest, which leaves the logarithm
    undefined, gives zero.
    """
    if amount == 0:
        raise ScheduleCalculationError("Nothing left to repay; the term is undefined")
    if rate == 0:
        return round_half_up(amount / installment + 0.5)
    headroom = installment / amount - rate
    if headroom == 0:
        raise ScheduleCalculationError("Installment only covers interest; the term is infinite")
    argument = rate / headroom + 1
    if argument <= 0:
        return 0
    return round_half_up(math.log(argument, 1 + rate) + 0.5)


class AnnuityStrategy(RepaymentStrategy):
    """Equal total installments; interest on the balance at a fixed period rate."""

    def initial_state(self, params: LoanParams) -> RepaymentState:
        return RepaymentState(
            period=1,
            periods_count=params.periods_count,
            remaining_amount=params.requested_sum,
            installment=annuity_payment(
                params.requested_sum, period_rate(params), params.periods_count
            ),
            interest=0,
            previous_date=params.initial_date,
        )

    def interest_due(self, params: LoanParams, state: RepaymentState, due_date: date) -> int:
        return self._interest_on(params, state.remaining_amount)

    def reduce_payment(self, params: LoanParams, state: RepaymentState) -> RepaymentState:
        return replace(
            state,
            installment=annuity_payment(
                state.remaining_amount, period_rate(params), state.remaining_periods
            ),
            interest=self._interest_on(params, state.remaining_amount),
        )

    def reduce_term(self, params: LoanParams, state: RepaymentState) -> RepaymentState:
        return state.shorten(
            remaining_term(state.remaining_amount, state.installment, period_rate(params))
        )

    def principal_due(self, state: RepaymentState) -> int:
        if state.is_last_period:
            total = state.remaining_amount + state.interest
        else:
            total = state.installment
        return int(total - state.interest)

    @staticmethod
    def _interest_on(params: LoanParams, amount: int) -> int:
        return round_half_up(
            amount
            * params.annual_rate
            / (periods_per_year(params.duration_type) * 10000)
        )
