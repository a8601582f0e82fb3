"""Loan terms, unscheduled payments and repayment strategies."""

from .calculator import Calculator, UnknownRepaymentTypeError, default_strategies
from .filters import payments_between, validate_payments
from .params import LoanParams, UnscheduledPayment
from .strategies import (
    AnnuityStrategy,
    DifferentialStrategy,
    RepaymentState,
    RepaymentStrategy,
    ScheduleCalculationError,
)

__all__ = [
    "AnnuityStrategy",
    "Calculator",
    "DifferentialStrategy",
    "LoanParams",
    "RepaymentState",
    "RepaymentStrategy",
    "ScheduleCalculationError",
    "UnknownRepaymentTypeError",
    "UnscheduledPayment",
    "default_strategies",
    "payments_between",
    "validate_payments",
]
