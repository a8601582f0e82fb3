"""Day count helpers for interest accrual and cost annualization."""

from __future__ import annotations

import calendar
import logging
from datetime import date
from typing import Tuple

from .types import DAYS_IN_PERIOD, DurationType

logger = logging.getLogger(__name__)

DAYS_IN_CIVIL_YEAR = 365


def days_between(start: date, end: date) -> int:
    """Return the absolute number of calendar days between two dates."""
    if end < start:
        logger.debug("Swapping start/end for day count: %s, %s", start, end)
        start, end = end, start
    return (end - start).days


def days_in_year(dt: date) -> int:
    """Return 366 for dates in a leap year, 365 otherwise."""
    return 366 if calendar.isleap(dt.year) else 365


def periods_per_year(duration: DurationType) -> int:
    """Whole base periods in a civil year, used to derive the per-period rate."""
    return DAYS_IN_CIVIL_YEAR // DAYS_IN_PERIOD[DurationType.coerce(duration)]


def base_periods_per_year(duration: DurationType) -> float:
    """Fractional base periods in a civil year, used to annualize a per-period rate."""
    return DAYS_IN_CIVIL_YEAR / DAYS_IN_PERIOD[DurationType.coerce(duration)]


def base_period_offset(start: date, end: date, duration: DurationType) -> Tuple[int, float]:
    """Split the distance between two dates into whole and fractional base periods.

    Returns ``(q, e)`` where ``q`` is the number of whole base periods and ``e`` the
    remaining fraction of a base period.
    """
    base = DAYS_IN_PERIOD[DurationType.coerce(duration)]
    days = days_between(start, end)
    return days // base, (days % base) / base
