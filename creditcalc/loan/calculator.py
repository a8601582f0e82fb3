"""Dispatch from a repayment type to the strategy computing its schedule."""

from __future__ import annotations

import logging
from typing import Dict, Hashable, Iterable, Mapping, Optional

from creditcalc.conventions.types import RepaymentType
from creditcalc.schedule.repayment import RepaymentSchedule

from .params import LoanParams, UnscheduledPayment
from .strategies import AnnuityStrategy, DifferentialStrategy, RepaymentStrategy

logger = logging.getLogger(__name__)


class UnknownRepaymentTypeError(ValueError):
    """Raised when no strategy is configured for a repayment type."""


def default_strategies() -> Dict[Hashable, RepaymentStrategy]:
    """Strategy mapping used when a Calculator is created without one."""
    return {
        RepaymentType.ANNUITY: AnnuityStrategy(),
        RepaymentType.DIFFERENTIAL: DifferentialStrategy(),
    }


class Calculator:
    """Looks up the configured strategy for a repayment type and runs it."""

    def __init__(self, strategies: Optional[Mapping[Hashable, RepaymentStrategy]] = None):
        if strategies is None:
            strategies = default_strategies()
        for strategy in strategies.values():
            if not isinstance(strategy, RepaymentStrategy):
                raise TypeError(
                    f"Strategies must implement RepaymentStrategy, got {type(strategy)}"
                )
        self._strategies: Dict[Hashable, RepaymentStrategy] = dict(strategies)

    def register(self, repayment_type: Hashable, strategy: RepaymentStrategy) -> None:
        """Add or replace the strategy for ``repayment_type``."""
        if not isinstance(strategy, RepaymentStrategy):
            raise TypeError(f"Strategies must implement RepaymentStrategy, got {type(strategy)}")
        self._strategies[repayment_type] = strategy

    def get_strategy(self, repayment_type: Hashable) -> RepaymentStrategy:
        if repayment_type in self._strategies:
            return self._strategies[repayment_type]
        if isinstance(repayment_type, str):
            try:
                coerced = RepaymentType.coerce(repayment_type)
            except ValueError:
                coerced = None
            if coerced in self._strategies:
                return self._strategies[coerced]
        raise UnknownRepaymentTypeError(f"Unsupported repayment type: {repayment_type!r}")

    def calculate(
        self,
        params: LoanParams,
        unscheduled_payments: Iterable[UnscheduledPayment] = (),
        repayment_type: Hashable = RepaymentType.ANNUITY,
    ) -> RepaymentSchedule:
        """Build the repayment schedule of ``params`` for ``repayment_type``."""
        strategy = self.get_strategy(repayment_type)
        logger.debug("Calculating %s schedule with %s", repayment_type, type(strategy).__name__)
        return strategy.get_repayment_schedule(params, unscheduled_payments)
