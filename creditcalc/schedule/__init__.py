"""
Repayment schedules: due dates, ledger entries and the effective cost solver.
"""

from .adjustments import add_duration, due_dates
from .core import LedgerEntry
from .repayment import RepaymentSchedule
from .solver import (
    RootFindingError,
    SolverConfig,
    annualize,
    get_default_solver_config,
    net_present_value,
    scan_rate,
    set_default_solver_config,
    solve_effective_rate,
)

__all__ = [
    "LedgerEntry",
    "RepaymentSchedule",
    "RootFindingError",
    "SolverConfig",
    "add_duration",
    "annualize",
    "due_dates",
    "get_default_solver_config",
    "net_present_value",
    "scan_rate",
    "set_default_solver_config",
    "solve_effective_rate",
]
