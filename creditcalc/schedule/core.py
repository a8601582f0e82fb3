"""
Core data structures for repayment schedules.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class LedgerEntry:
    """A single row of a repayment schedule.

    Amounts are integers in minor currency units. ``unscheduled`` marks the
    rows inserted for out-of-cadence principal payments and
    ``is_disbursement`` the opening row of a schedule.
    """

    date: date
    interest: int
    principal: int
    balance: int
    fee: int = 0
    unscheduled: bool = False
    is_disbursement: bool = False

    @classmethod
    def disbursement(cls, on: date, amount: int) -> "LedgerEntry":
        """Opening row: nothing repaid, the whole loan outstanding."""
        return cls(date=on, interest=0, principal=0, balance=amount, is_disbursement=True)

    @classmethod
    def prepayment(cls, on: date, amount: int, balance: int) -> "LedgerEntry":
        """Row for an unscheduled principal payment."""
        return cls(date=on, interest=0, principal=amount, balance=balance, unscheduled=True)

    @property
    def payment(self) -> int:
        """Total amount due for the row."""
        return self.interest + self.principal + self.fee
