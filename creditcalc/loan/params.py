"""Loan parameters and unscheduled payment events."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date

from creditcalc.conventions.types import DurationType, RecalculationPolicy
from creditcalc.utils.date import to_date


@dataclass(frozen=True)
class LoanParams:
    """Terms of an installment loan.

    Attributes:
        initial_date: Date the loan is disbursed
        duration_type: Length of one repayment period
        periods_count: Number of scheduled installments
        requested_sum: Principal in minor currency units
        annual_rate: Nominal annual rate in hundredths of a percent (1250 = 12.50%)
        one_time_fee: Fee added to the first installment, minor units
        periodic_fee: Fee added to every installment, minor units
    """

    initial_date: date
    duration_type: DurationType
    periods_count: int
    requested_sum: int
    annual_rate: int
    one_time_fee: int = 0
    periodic_fee: int = 0

    def __post_init__(self):
        object.__setattr__(self, "initial_date", to_date(self.initial_date))
        object.__setattr__(self, "duration_type", DurationType.coerce(self.duration_type))
        if self.periods_count <= 0:
            raise ValueError(f"periods_count must be positive. Actual: {self.periods_count}")
        if self.requested_sum <= 0:
            raise ValueError(f"requested_sum must be positive. Actual: {self.requested_sum}")
        if self.annual_rate < 0:
            raise ValueError(f"annual_rate must be non-negative. Actual: {self.annual_rate}")
        if self.one_time_fee < 0 or self.periodic_fee < 0:
            raise ValueError("fees must be non-negative")

    def fee_for_period(self, period: int) -> int:
        """Fee charged with installment ``period`` (1-based)."""
        if period == 1:
            return self.periodic_fee + self.one_time_fee
        return self.periodic_fee

    def with_fees(self, one_time: int = 0, periodic: int = 0) -> "LoanParams":
        """Return a copy of the parameters with the given fees."""
        return replace(self, one_time_fee=one_time, periodic_fee=periodic)


@dataclass(frozen=True)
class UnscheduledPayment:
    """Out-of-cadence principal payment."""

    amount: int
    date: date
    policy: RecalculationPolicy = field(default=RecalculationPolicy.REDUCE_TERM)

    def __post_init__(self):
        object.__setattr__(self, "date", to_date(self.date))
        object.__setattr__(self, "policy", RecalculationPolicy.coerce(self.policy))
        if self.amount <= 0:
            raise ValueError(f"Unscheduled payment amount must be positive. Actual: {self.amount}")
