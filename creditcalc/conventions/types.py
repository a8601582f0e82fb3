"""
Basic types and enums used across the repayment calculators.
"""

from enum import Enum
from types import MappingProxyType


class _CoercibleEnum(Enum):
    """Enum accepting a member, its name or its value."""

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_")
            if key in cls.__members__:
                return cls[key]
        raise ValueError(f"Invalid {cls.__name__} value. Actual: {value!r}")


class DurationType(_CoercibleEnum):
    """Length of a repayment period."""

    WEEK = "WEEK"
    TWO_WEEKS = "TWO_WEEKS"
    MONTH = "MONTH"
    QUARTER = "QUARTER"


class RepaymentType(_CoercibleEnum):
    """Repayment schedule kinds."""

    ANNUITY = "ANNUITY"
    DIFFERENTIAL = "DIFFERENTIAL"


class RecalculationPolicy(_CoercibleEnum):
    """How the schedule reacts to an unscheduled payment."""

    REDUCE_PAYMENT = "REDUCE_PAYMENT"
    REDUCE_TERM = "REDUCE_TERM"


DAYS_IN_PERIOD = MappingProxyType(
    {
        DurationType.WEEK: 7,
        DurationType.TWO_WEEKS: 14,
        DurationType.MONTH: 30,
        DurationType.QUARTER: 91,
    }
)
