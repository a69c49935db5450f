"""Chained swap simulation against a single pool snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from pricing import PoolState, price_impact, spot_price, swap


@dataclass(frozen=True)
class SimulationStep:
    index: int
    amount_in: int
    amount_out: int
    price_impact: Decimal
    state: PoolState

    @property
    def spot_price(self) -> Decimal:
        """Spot price of the pool after this step was committed."""
        return spot_price(self.state)


def simulate_swaps(
    state: PoolState,
    amounts: Iterable[int],
    *,
    logger: Optional[logging.Logger] = None,
) -> list[SimulationStep]:
    """Apply each input amount in order, committing every swap before the next quote."""
    log = logger or logging.getLogger(__name__)
    steps: list[SimulationStep] = []
    current = state
    for index, amount_in in enumerate(amounts, start=1):
        impact = price_impact(current, amount_in)
        result = swap(current, amount_in)
        current = result.state
        log.info(
            "step %d: in=%d out=%d reserves=(%d, %d)",
            index,
            result.amount_in,
            result.amount_out,
            current.reserve_in,
            current.reserve_out,
        )
        steps.append(
            SimulationStep(
                index=index,
                amount_in=result.amount_in,
                amount_out=result.amount_out,
                price_impact=impact,
                state=current,
            )
        )
    return steps
