"""Installment loan calculator.

Builds annuity and differential repayment schedules, applies unscheduled
principal payments, and derives the effective annual cost of a loan.

Key modules:
- loan: Loan terms, unscheduled payments, strategies and the Calculator
- schedule: Due dates, ledger entries, schedule container and cost solver
- conventions: Duration, repayment and recalculation types, day counts
"""

from creditcalc.conventions.types import DurationType, RecalculationPolicy, RepaymentType
from creditcalc.loan import (
    AnnuityStrategy,
    Calculator,
    DifferentialStrategy,
    LoanParams,
    UnscheduledPayment,
)
from creditcalc.schedule import LedgerEntry, RepaymentSchedule

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "AnnuityStrategy",
    "Calculator",
    "DifferentialStrategy",
    "DurationType",
    "LedgerEntry",
    "LoanParams",
    "RecalculationPolicy",
    "RepaymentSchedule",
    "RepaymentType",
    "UnscheduledPayment",
]
