"""Repayment schedule container and loan cost metrics."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

import pandas as pd

from .core import LedgerEntry
from .solver import (
    RootFindingError,
    SolverConfig,
    annualize,
    get_default_solver_config,
    solve_effective_rate,
)

if TYPE_CHECKING:
    from creditcalc.loan.params import LoanParams

logger = logging.getLogger(__name__)


class RepaymentSchedule(Sequence):
    """Read-only sequence of ledger entries produced by a repayment strategy.

    The first entry is the disbursement; scheduled installments and
    unscheduled payments follow in date order.
    """

    def __init__(
        self,
        entries: List[LedgerEntry],
        params: "LoanParams",
        solver_config: Optional[SolverConfig] = None,
    ):
        for entry in entries:
            if not isinstance(entry, LedgerEntry):
                raise TypeError(
                    f"Schedule entries must be LedgerEntry instances, got {type(entry)}"
                )
        self._entries = tuple(entries)
        self._params = params
        self._solver_config = solver_config
        self._effective_rate: Optional[float] = None

    @property
    def params(self) -> "LoanParams":
        """Loan parameters the schedule was built from."""
        return self._params

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LedgerEntry]:
        return iter(self._entries)

    def __getitem__(self, position: int) -> LedgerEntry:
        if not isinstance(position, int) or isinstance(position, bool):
            raise TypeError(f"Schedule positions must be integers, got {type(position)}")
        if not 0 <= position < len(self._entries):
            raise IndexError(
                f"Invalid position. Position: {position}, elements count: {len(self._entries)}"
            )
        return self._entries[position]

    def __repr__(self) -> str:
        return f"RepaymentSchedule(entries={len(self._entries)}, params={self._params!r})"

    @property
    def final_balance(self) -> int:
        """Outstanding principal after the last entry."""
        return self._entries[-1].balance

    def scheduled_entries(self) -> List[LedgerEntry]:
        """Installment rows, without the disbursement and unscheduled payments."""
        return [
            entry
            for entry in self._entries
            if not (entry.is_disbursement or entry.unscheduled)
        ]

    def total_payments(self) -> int:
        """Sum of all payments, fees included."""
        return sum(entry.payment for entry in self._entries)

    def total_interest(self) -> int:
        """Interest paid over the life of the loan (the overpayment)."""
        return sum(entry.interest for entry in self._entries)

    def cashflows(self) -> List[Tuple[date, int]]:
        """Signed cash flows from the lender's side: the loan out, payments in."""
        if not self._entries:
            return []
        first = self._entries[0]
        flows = [(first.date, -first.balance)]
        flows.extend((entry.date, entry.payment) for entry in self._entries[1:])
        return flows

    def effective_rate(self) -> float:
        """Per-base-period rate equating the present value of the cash flows to zero."""
        if self._effective_rate is None:
            try:
                self._effective_rate = solve_effective_rate(
                    self.cashflows(), self._params.duration_type, self._solver_config
                )
            except RootFindingError as exc:
                logger.error("Effective cost scan failed: %s", exc)
                raise
        return self._effective_rate

    def effective_cost(self) -> str:
        """Annual effective cost in percent, as a fixed-point string (e.g. ``"12.683"``)."""
        precision = (self._solver_config or get_default_solver_config()).precision
        value = annualize(self.effective_rate(), self._params.duration_type)
        return f"{value:.{precision}f}"

    def to_frame(self) -> pd.DataFrame:
        """Return the schedule as a DataFrame, one row per entry."""
        return pd.DataFrame(
            [
                {
                    "date": entry.date,
                    "interest": entry.interest,
                    "principal": entry.principal,
                    "fee": entry.fee,
                    "payment": entry.payment,
                    "balance": entry.balance,
                    "unscheduled": entry.unscheduled,
                }
                for entry in self._entries
            ],
            columns=["date", "interest", "principal", "fee", "payment", "balance", "unscheduled"],
        )
