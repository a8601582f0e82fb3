"""
Due date arithmetic for repayment schedules.
"""

from datetime import date, datetime
from typing import Iterator, Union

from dateutil.relativedelta import relativedelta

from creditcalc.conventions.types import DAYS_IN_PERIOD, DurationType


def add_duration(
    initial: Union[date, datetime], duration: DurationType, periods: int
) -> date:
    """Return the due date ``periods`` repayment periods after ``initial``.

    Weeks, two-week periods and quarters are fixed day counts. Months are
    calendar months counted from ``initial`` (not chained), so a loan taken on
    Jan 31 falls due on the last day of February, then on Mar 31.
    """
    if periods <= 0:
        raise ValueError(f"Invalid number of periods: {periods}")
    if isinstance(initial, datetime):
        initial = initial.date()

    duration = DurationType.coerce(duration)
    if duration == DurationType.MONTH:
        # relativedelta clamps the day to the end of a shorter month
        return initial + relativedelta(months=periods)
    return initial + relativedelta(days=DAYS_IN_PERIOD[duration] * periods)


def due_dates(
    initial: Union[date, datetime], duration: DurationType, count: int
) -> Iterator[date]:
    """Yield the first ``count`` due dates after ``initial``."""
    for period in range(1, count + 1):
        yield add_duration(initial, duration, period)
