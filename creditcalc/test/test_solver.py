"""Tests for the effective cost scan."""

from dataclasses import replace
from datetime import date

import pytest

import creditcalc.schedule.repayment as repayment_module
from creditcalc.conventions.types import DurationType
from creditcalc.loan.strategies import AnnuityStrategy, DifferentialStrategy
from creditcalc.schedule.repayment import RepaymentSchedule
from creditcalc.schedule.solver import (
    RootFindingError,
    SolverConfig,
    annualize,
    get_default_solver_config,
    net_present_value,
    scan_rate,
    set_default_solver_config,
    solve_effective_rate,
)


def test_net_present_value():
    assert net_present_value(0.0, [-100, 110], [0, 1], [0.0, 0.0]) == pytest.approx(10.0)
    assert net_present_value(0.1, [-100, 110], [0, 1], [0.0, 0.0]) == pytest.approx(0.0)
    # half a period of simple interest on top of one compounded period
    assert net_present_value(0.1, [-100, 115.5], [0, 1], [0.0, 0.5]) == pytest.approx(0.0)


def test_scan_finds_root_to_two_steps():
    result = scan_rate([-100, 110], [0, 1], [0.0, 0.0])
    assert result.rate == pytest.approx(0.1, abs=2.5e-6)
    assert result.rate > 0.1
    assert result.npv == pytest.approx(0.0, abs=1e-3)


@pytest.mark.parametrize(
    "step, first_non_positive",
    [
        # grid 0.09 -> npv 0.92, grid 0.12 -> npv -1.79
        (0.03, 0.12),
        # grid 0.08 -> npv 1.85, grid 0.12 -> npv -1.79
        (0.04, 0.12),
    ],
)
def test_scan_reports_rate_after_first_non_positive(step, first_non_positive):
    result = scan_rate([-100, 110], [0, 1], [0.0, 0.0], SolverConfig(step=step))
    assert result.rate == pytest.approx(first_non_positive + step)
    assert result.steps == round(first_non_positive / step) + 1
    assert result.npv == pytest.approx(100 * (1.1 / (1 + first_non_positive) - 1))


def test_scan_across_chunk_boundary():
    # root at 0.1055, first non-positive grid rate 0.106
    flows = ([-100, 110.55], [0, 1], [0.0, 0.0])
    chunked = scan_rate(*flows, SolverConfig(step=0.001, chunk_size=7))
    whole = scan_rate(*flows, SolverConfig(step=0.001))
    assert chunked.steps == whole.steps == 107
    assert chunked.rate == pytest.approx(0.107)


def test_scan_without_gain_reports_one_step():
    result = scan_rate([-100, 100], [0, 1], [0.0, 0.0])
    assert result.steps == 1
    assert result.rate == pytest.approx(1e-6)
    assert result.npv == 0.0


def test_scan_bound():
    with pytest.raises(RootFindingError, match="still positive"):
        scan_rate([-100, 110], [0, 1], [0.0, 0.0], SolverConfig(max_steps=10))


def test_solve_effective_rate_uses_base_period_offsets():
    flows = [(date(2024, 1, 1), -1_000), (date(2024, 1, 15), 1_020)]
    rate = solve_effective_rate(flows, DurationType.WEEK)
    # two whole weeks compounded
    assert rate == pytest.approx(1.02 ** 0.5 - 1, abs=2.5e-6)


def test_solve_effective_rate_requires_cashflows():
    with pytest.raises(ValueError):
        solve_effective_rate([], DurationType.MONTH)


def test_annualize():
    assert annualize(0.03, DurationType.QUARTER) == pytest.approx(0.03 * 365 / 91 * 100)


def test_single_period_loan_recovers_period_rate(quarterly_single_period):
    schedule = AnnuityStrategy().get_repayment_schedule(quarterly_single_period)
    assert schedule[1].date == date(2024, 4, 1)
    assert schedule[1].payment == 1_030_000

    expected = 0.03 * (365 / 91) * 100
    assert abs(float(schedule.effective_cost()) - expected) < 2e-3
    assert schedule.effective_rate() == pytest.approx(0.03, abs=2.5e-6)


def test_effective_cost_format(monthly_loan):
    cost = AnnuityStrategy().get_repayment_schedule(monthly_loan).effective_cost()
    whole, decimals = cost.split(".")
    assert len(decimals) == 3


def test_effective_cost_of_monthly_annuity(monthly_loan):
    schedule = AnnuityStrategy().get_repayment_schedule(monthly_loan)
    assert schedule.effective_cost() == "11.994"


def test_effective_cost_without_interest(monthly_loan):
    params = replace(monthly_loan, annual_rate=0)
    schedule = AnnuityStrategy().get_repayment_schedule(params)
    assert schedule.total_payments() == params.requested_sum
    # the scan stops at zero and reports one grid step above it
    assert schedule.effective_rate() == pytest.approx(1e-6)
    assert schedule.effective_cost() == "0.001"


def test_fees_raise_effective_cost(monthly_loan):
    plain = DifferentialStrategy().get_repayment_schedule(monthly_loan)
    with_fees = DifferentialStrategy().get_repayment_schedule(
        monthly_loan.with_fees(one_time=10_000, periodic=500)
    )
    assert float(with_fees.effective_cost()) > float(plain.effective_cost())


def test_effective_cost_is_memoized(monthly_loan, monkeypatch):
    calls = []
    original = repayment_module.solve_effective_rate

    def counting(*args, **kwargs):
        calls.append(args)
        return original(*args, **kwargs)

    monkeypatch.setattr(repayment_module, "solve_effective_rate", counting)
    schedule = AnnuityStrategy().get_repayment_schedule(monthly_loan)

    first = schedule.effective_cost()
    assert schedule.effective_cost() == first
    schedule.effective_rate()
    assert len(calls) == 1


def test_solver_failure_propagates(monthly_loan):
    built = AnnuityStrategy().get_repayment_schedule(monthly_loan)
    schedule = RepaymentSchedule(list(built), monthly_loan, SolverConfig(max_steps=5))
    with pytest.raises(RootFindingError):
        schedule.effective_cost()


def test_default_solver_config_roundtrip():
    original = get_default_solver_config()
    try:
        set_default_solver_config(SolverConfig(precision=1))
        assert get_default_solver_config().precision == 1
    finally:
        set_default_solver_config(original)
    with pytest.raises(TypeError):
        set_default_solver_config({"step": 1e-6})
