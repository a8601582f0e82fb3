"""Shared fixtures for the repayment calculator tests."""

from datetime import date

import pytest

from creditcalc.conventions.types import DurationType
from creditcalc.loan.params import LoanParams

START = date(2024, 1, 15)


@pytest.fixture
def monthly_loan() -> LoanParams:
    """1,000,000 at 12.00% over 12 monthly installments, no fees."""
    return LoanParams(
        initial_date=START,
        duration_type=DurationType.MONTH,
        periods_count=12,
        requested_sum=1_000_000,
        annual_rate=1200,
    )


@pytest.fixture
def quarterly_single_period() -> LoanParams:
    """One quarter, repaid with 3% interest after exactly one base period."""
    return LoanParams(
        initial_date=date(2024, 1, 1),
        duration_type=DurationType.QUARTER,
        periods_count=1,
        requested_sum=1_000_000,
        annual_rate=1200,
    )
