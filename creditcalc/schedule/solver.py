"""Effective cost solver: a monotone bracketing scan over the per-period rate."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence, Tuple

import numpy as np

from creditcalc.conventions.daycount import base_period_offset, base_periods_per_year
from creditcalc.conventions.types import DurationType

logger = logging.getLogger(__name__)

Cashflow = Tuple[date, int]


class RootFindingError(RuntimeError):
    """Raised when the scan reaches its bound without the NPV turning non-positive."""


@dataclass(frozen=True)
class SolverConfig:
    """Configuration for the effective cost scan.

    Attributes:
        step: Increment of the per-period rate between two evaluations
        max_steps: Number of grid rates tried before giving up
        chunk_size: Grid rates evaluated per vectorized batch
        precision: Decimal places of the reported effective cost
    """

    step: float = 1e-6
    max_steps: int = 10_000_000
    chunk_size: int = 4096
    precision: int = 3


@dataclass(frozen=True)
class ScanResult:
    rate: float
    steps: int
    npv: float


_DEFAULT_CONFIG = SolverConfig()


def get_default_solver_config() -> SolverConfig:
    """Return the solver configuration used when none is given."""
    return _DEFAULT_CONFIG


def set_default_solver_config(config: SolverConfig) -> None:
    """Replace the solver configuration used when none is given."""
    global _DEFAULT_CONFIG
    if not isinstance(config, SolverConfig):
        raise TypeError(f"Expected SolverConfig, got {type(config)}")
    _DEFAULT_CONFIG = config


def _npv_grid(
    rates: np.ndarray, amounts: np.ndarray, whole: np.ndarray, fraction: np.ndarray
) -> np.ndarray:
    """NPV of the cash flows at every rate in ``rates``."""
    grid = rates[:, np.newaxis]
    discount = (1.0 + fraction * grid) * (1.0 + grid) ** whole
    return (amounts / discount).sum(axis=1)


def net_present_value(
    rate: float,
    amounts: Sequence[float],
    whole: Sequence[int],
    fraction: Sequence[float],
) -> float:
    """Return ``sum(amounts[k] / ((1 + e[k] * rate) * (1 + rate) ** q[k]))``."""
    return float(
        _npv_grid(
            np.array([rate], dtype=float),
            np.asarray(amounts, dtype=float),
            np.asarray(whole, dtype=float),
            np.asarray(fraction, dtype=float),
        )[0]
    )


def scan_rate(
    amounts: Sequence[float],
    whole: Sequence[int],
    fraction: Sequence[float],
    config: Optional[SolverConfig] = None,
) -> ScanResult:
    """Scan rates ``0, step, 2*step, ...`` until the NPV is no longer positive.

    The NPV is assumed to decrease with the rate. The scan reports the grid
    rate one step past the first rate with a non-positive NPV, and ``npv`` is
    the value at that first rate.

    Raises:
        RootFindingError: If ``config.max_steps`` rates are tried without a sign change
    """
    config = config or _DEFAULT_CONFIG
    amounts_arr = np.asarray(amounts, dtype=float)
    whole_arr = np.asarray(whole, dtype=float)
    fraction_arr = np.asarray(fraction, dtype=float)

    start = 0
    while start < config.max_steps:
        stop = min(start + config.chunk_size, config.max_steps)
        steps = np.arange(start, stop)
        values = _npv_grid(steps * config.step, amounts_arr, whole_arr, fraction_arr)
        hits = np.flatnonzero(values <= 0.0)
        if hits.size:
            steps_taken = start + int(hits[0]) + 1
            value = float(values[hits[0]])
            logger.debug(
                "Rate scan stopped after %s steps: rate=%s npv=%s",
                steps_taken,
                steps_taken * config.step,
                value,
            )
            return ScanResult(rate=steps_taken * config.step, steps=steps_taken, npv=value)
        start = stop

    raise RootFindingError(
        f"NPV still positive after {config.max_steps} steps "
        f"(rate {config.max_steps * config.step:.6f} per period)"
    )


def solve_effective_rate(
    cashflows: Sequence[Cashflow],
    duration: DurationType,
    config: Optional[SolverConfig] = None,
) -> float:
    """Return the per-base-period rate zeroing the NPV of dated cash flows.

    Offsets are measured from the first cash flow's date in base periods of
    ``duration``, split into whole periods (compounded) and a remaining
    fraction (simple interest).
    """
    if not cashflows:
        raise ValueError("cashflows must not be empty")

    origin = cashflows[0][0]
    amounts, whole, fraction = [], [], []
    for dt, amount in cashflows:
        q, e = base_period_offset(origin, dt, duration)
        amounts.append(amount)
        whole.append(q)
        fraction.append(e)

    return scan_rate(amounts, whole, fraction, config).rate


def annualize(rate: float, duration: DurationType) -> float:
    """Convert a per-base-period rate to an annual percentage."""
    return rate * base_periods_per_year(duration) * 100
