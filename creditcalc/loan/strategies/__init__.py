"""Repayment strategies: annuity and differential schedules."""

from .annuity import AnnuityStrategy, annuity_payment, period_rate, remaining_term
from .base import RepaymentState, RepaymentStrategy, ScheduleCalculationError
from .differential import DifferentialStrategy

__all__ = [
    "AnnuityStrategy",
    "DifferentialStrategy",
    "RepaymentState",
    "RepaymentStrategy",
    "ScheduleCalculationError",
    "annuity_payment",
    "period_rate",
    "remaining_term",
]
