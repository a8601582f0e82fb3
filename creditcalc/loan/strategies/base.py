"""Shared period loop for repayment strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import date
from typing import Iterable

from creditcalc.conventions.types import RecalculationPolicy
from creditcalc.loan.filters import payments_between, validate_payments
from creditcalc.loan.params import LoanParams, UnscheduledPayment
from creditcalc.schedule.adjustments import add_duration
from creditcalc.schedule.core import LedgerEntry
from creditcalc.schedule.repayment import RepaymentSchedule

logger = logging.getLogger(__name__)


class ScheduleCalculationError(ValueError):
    """Raised when a recalculation has no meaningful result."""


@dataclass(frozen=True)
class RepaymentState:
    """Running totals carried from one repayment period to the next.

    Attributes:
        period: Current period index (1-based)
        periods_count: Index of the last period, shortened by term reductions
        remaining_amount: Outstanding principal, minor units
        installment: Fixed amount being amortized; the total payment for an
            annuity, the principal portion for a differential schedule
        interest: Interest due for the current period
        previous_date: Due date of the previous period (disbursement date at first)
    """

    period: int
    periods_count: int
    remaining_amount: int
    installment: float
    interest: int
    previous_date: date

    @property
    def is_last_period(self) -> bool:
        return self.period == self.periods_count

    @property
    def remaining_periods(self) -> int:
        """Periods left including the current one."""
        return self.periods_count - self.period + 1

    def pay_down(self, amount: int) -> "RepaymentState":
        return replace(self, remaining_amount=self.remaining_amount - amount)

    def shorten(self, remaining_periods: int) -> "RepaymentState":
        """Make the loan end ``remaining_periods`` periods from now, current included."""
        return replace(self, periods_count=self.period + remaining_periods - 1)

    def close_period(self, due_date: date, principal: int) -> "RepaymentState":
        return replace(
            self,
            period=self.period + 1,
            remaining_amount=self.remaining_amount - principal,
            interest=0,
            previous_date=due_date,
        )


class RepaymentStrategy(ABC):
    """Builds a repayment schedule for one repayment convention."""

    def get_repayment_schedule(
        self,
        params: LoanParams,
        unscheduled_payments: Iterable[UnscheduledPayment] = (),
    ) -> RepaymentSchedule:
        """
        Run the period loop and return the resulting schedule.

        Unscheduled payments dated in ``[previous due date, due date)`` are
        applied before the installment of that period, each one followed by
        the recalculation its policy asks for.

        Args:
            params: Loan terms
            unscheduled_payments: Out-of-cadence principal payments

        Returns:
            A new RepaymentSchedule
        """
        if not isinstance(params, LoanParams):
            raise TypeError(f"Expected LoanParams, got {type(params)}")
        payments = validate_payments(unscheduled_payments)

        entries = [LedgerEntry.disbursement(params.initial_date, params.requested_sum)]
        state = self.initial_state(params)
        while state.period <= state.periods_count:
            due_date = add_duration(params.initial_date, params.duration_type, state.period)
            state = replace(state, interest=self.interest_due(params, state, due_date))

            for payment in payments_between(state.previous_date, due_date, payments):
                state = self.recalculate(params, state.pay_down(payment.amount), payment.policy)
                logger.debug(
                    "Period %s: unscheduled %s on %s (%s), balance=%s installment=%s last=%s",
                    state.period,
                    payment.amount,
                    payment.date,
                    payment.policy.value,
                    state.remaining_amount,
                    state.installment,
                    state.periods_count,
                )
                entries.append(
                    LedgerEntry.prepayment(payment.date, payment.amount, state.remaining_amount)
                )

            principal = self.principal_due(state)
            entries.append(
                LedgerEntry(
                    date=due_date,
                    interest=state.interest,
                    principal=principal,
                    balance=state.remaining_amount - principal,
                    fee=params.fee_for_period(state.period),
                )
            )
            state = state.close_period(due_date, principal)

        logger.info(
            "%s schedule built: %s entries, final balance %s",
            type(self).__name__,
            len(entries),
            entries[-1].balance,
        )
        return RepaymentSchedule(entries, params)

    def recalculate(
        self, params: LoanParams, state: RepaymentState, policy: RecalculationPolicy
    ) -> RepaymentState:
        """Adjust the state after an unscheduled payment reduced the balance."""
        if policy == RecalculationPolicy.REDUCE_PAYMENT:
            return self.reduce_payment(params, state)
        if policy == RecalculationPolicy.REDUCE_TERM:
            state = self.reduce_term(params, state)
            if state.periods_count < state.period:
                logger.warning(
                    "Term reduction in period %s left no periods to repay (last period %s)",
                    state.period,
                    state.periods_count,
                )
            return state
        raise ValueError(f"Unknown recalculation policy: {policy}")

    @abstractmethod
    def initial_state(self, params: LoanParams) -> RepaymentState:
        """State before the first period."""

    @abstractmethod
    def interest_due(self, params: LoanParams, state: RepaymentState, due_date: date) -> int:
        """Interest accrued between ``state.previous_date`` and ``due_date``."""

    @abstractmethod
    def reduce_payment(self, params: LoanParams, state: RepaymentState) -> RepaymentState:
        """Keep the term, lower the periodic amount."""

    @abstractmethod
    def reduce_term(self, params: LoanParams, state: RepaymentState) -> RepaymentState:
        """Keep the periodic amount, shorten the term."""

    @abstractmethod
    def principal_due(self, state: RepaymentState) -> int:
        """Principal repaid by the installment of the current period."""
