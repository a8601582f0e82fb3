"""Tests for due date arithmetic."""

from datetime import date, datetime

import pytest

from creditcalc.conventions.types import DurationType
from creditcalc.schedule.adjustments import add_duration, due_dates


def test_month_end_clamps_in_non_leap_year():
    assert add_duration(date(2023, 1, 31), DurationType.MONTH, 1) == date(2023, 2, 28)


def test_month_end_clamps_in_leap_year():
    assert add_duration(date(2024, 1, 31), DurationType.MONTH, 1) == date(2024, 2, 29)


def test_months_are_counted_from_the_initial_date():
    # not chained through the clamped February date
    assert add_duration(date(2023, 1, 31), DurationType.MONTH, 2) == date(2023, 3, 31)
    assert add_duration(date(2023, 1, 31), DurationType.MONTH, 3) == date(2023, 4, 30)


def test_months_cross_year_boundary():
    assert add_duration(date(2024, 11, 30), DurationType.MONTH, 3) == date(2025, 2, 28)


@pytest.mark.parametrize(
    "duration, periods, expected",
    [
        (DurationType.WEEK, 1, date(2024, 1, 8)),
        (DurationType.TWO_WEEKS, 3, date(2024, 2, 12)),
        (DurationType.QUARTER, 1, date(2024, 4, 1)),
        (DurationType.QUARTER, 4, date(2024, 12, 30)),
    ],
)
def test_fixed_length_periods(duration, periods, expected):
    assert add_duration(date(2024, 1, 1), duration, periods) == expected


def test_datetime_is_truncated_to_date():
    result = add_duration(datetime(2024, 1, 1, 15, 30), DurationType.WEEK, 1)
    assert result == date(2024, 1, 8)
    assert not isinstance(result, datetime)


@pytest.mark.parametrize("periods", [0, -1])
def test_non_positive_periods_rejected(periods):
    with pytest.raises(ValueError, match="Invalid number of periods"):
        add_duration(date(2024, 1, 1), DurationType.MONTH, periods)


def test_unknown_duration_rejected():
    with pytest.raises(ValueError):
        add_duration(date(2024, 1, 1), "fortnight", 1)


def test_due_dates():
    assert list(due_dates(date(2024, 1, 31), DurationType.MONTH, 3)) == [
        date(2024, 2, 29),
        date(2024, 3, 31),
        date(2024, 4, 30),
    ]
