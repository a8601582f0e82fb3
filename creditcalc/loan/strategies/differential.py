"""Differential repayment: a constant principal portion, interest on actual days."""

from __future__ import annotations

from dataclasses import replace
from datetime import date

from creditcalc.conventions.daycount import days_between, days_in_year
from creditcalc.loan.params import LoanParams
from creditcalc.utils.mathutils import round_half_up

from .base import RepaymentState, RepaymentStrategy, ScheduleCalculationError


class DifferentialStrategy(RepaymentStrategy):
    """Equal principal portions with declining installments.

    Interest accrues on the calendar days between due dates, annualized by
    the length of the civil year the period starts in.
    """

    def initial_state(self, params: LoanParams) -> RepaymentState:
        return RepaymentState(
            period=1,
            periods_count=params.periods_count,
            remaining_amount=params.requested_sum,
            installment=params.requested_sum / params.periods_count,
            interest=0,
            previous_date=params.initial_date,
        )

    def interest_due(self, params: LoanParams, state: RepaymentState, due_date: date) -> int:
        days = days_between(state.previous_date, due_date)
        return round_half_up(
            state.remaining_amount
            * params.annual_rate
            * days
            / (days_in_year(state.previous_date) * 10000)
        )

    def reduce_payment(self, params: LoanParams, state: RepaymentState) -> RepaymentState:
        if state.remaining_periods <= 0:
            raise ScheduleCalculationError(
                f"Cannot spread a balance over {state.remaining_periods} periods"
            )
        return replace(state, installment=state.remaining_amount / state.remaining_periods)

    def reduce_term(self, params: LoanParams, state: RepaymentState) -> RepaymentState:
        if state.installment == 0:
            raise ScheduleCalculationError("No principal portion left to derive the term from")
        return state.shorten(round_half_up(state.remaining_amount / state.installment + 0.5))

    def principal_due(self, state: RepaymentState) -> int:
        if state.is_last_period:
            # rounding residue goes into the final installment
            return state.remaining_amount
        return round_half_up(state.installment)
