"""Duration, repayment and recalculation conventions."""

from .daycount import (
    base_period_offset,
    base_periods_per_year,
    days_between,
    days_in_year,
    periods_per_year,
)
from .types import DAYS_IN_PERIOD, DurationType, RecalculationPolicy, RepaymentType

__all__ = [
    "DAYS_IN_PERIOD",
    "DurationType",
    "RecalculationPolicy",
    "RepaymentType",
    "base_period_offset",
    "base_periods_per_year",
    "days_between",
    "days_in_year",
    "periods_per_year",
]
