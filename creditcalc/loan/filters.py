"""
Selection of unscheduled payments falling into a repayment period.
"""

from datetime import date
from typing import Iterable, List

from .params import UnscheduledPayment


def validate_payments(payments: Iterable[UnscheduledPayment]) -> List[UnscheduledPayment]:
    """
    Check every element before any of them is used.

    Args:
        payments: Unscheduled payments supplied by the caller

    Returns:
        The payments as a list

    Raises:
        TypeError: If an element is not an UnscheduledPayment
    """
    result = list(payments)
    for payment in result:
        if not isinstance(payment, UnscheduledPayment):
            raise TypeError(
                f"Expected UnscheduledPayment instances, got {type(payment)}"
            )
    return result


def payments_between(
    start: date, end: date, payments: Iterable[UnscheduledPayment]
) -> List[UnscheduledPayment]:
    """
    Payments dated in ``[start, end)``, earliest first.

    Args:
        start: First day of the range (inclusive)
        end: Last day of the range (exclusive)
        payments: Payments to filter

    Returns:
        Matching payments sorted by date; equal dates keep their input order
    """
    selected = [p for p in validate_payments(payments) if start <= p.date < end]
    return sorted(selected, key=lambda p: p.date)
