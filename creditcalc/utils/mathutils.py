"""Numeric helpers for minor-unit arithmetic."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Unlike builtin ``round``, ties never go to even:
    ``round_half_up(2.5) == 3`` and ``round_half_up(-2.5) == -3``.

    Parameters
    ----------
    value : float
        Amount in minor currency units, possibly fractional

    Returns
    -------
    int
        The rounded amount
    """
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))
