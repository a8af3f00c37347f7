"""
Merit-Order Dispatch

Demand is met by consuming output from producers in ascending marginal
cost order until it is satisfied.

Algorithm:
    remaining = demand
    for producer in sorted(producers, key=cost):    # stable
        contribution = min(remaining, producer.production)
        remaining -= contribution
        cost += contribution * producer.cost

INVARIANTS:
1. Producers with equal cost are consumed in insertion order
2. The caller's producer sequence is never reordered
3. Once remaining demand reaches 0, further producers contribute 0
4. A NaN demand dispatches nothing and costs NaN
5. Producers with a NaN cost sort after all others, in insertion order;
   any NaN cost makes the dispatch cost NaN
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Protocol, Sequence

from refactoring_kata.core.math import Number, is_nan

logger = logging.getLogger(__name__)


class Dispatchable(Protocol):
    """Anything with a name, a marginal cost and a production quantity."""

    @property
    def name(self) -> str: ...

    @property
    def cost(self) -> Number: ...

    @property
    def production(self) -> int: ...


@dataclass(frozen=True)
class DispatchStep:
    """One producer's share of the dispatched demand."""

    producer_name: str
    cost: Number
    contribution: Number

    @property
    def step_cost(self) -> Number:
        return self.contribution * self.cost


def merit_order(producers: Iterable[Dispatchable]) -> List[Dispatchable]:
    """
    Producers sorted by ascending cost.

    Returns a new list; ties keep their original relative order.
    NaN costs go last.
    """
    return sorted(producers, key=lambda p: (is_nan(p.cost), 0 if is_nan(p.cost) else p.cost))


def dispatch_demand(demand: Number, producers: Sequence[Dispatchable]) -> List[DispatchStep]:
    """
    Walk the merit order and allocate demand to producers.

    Args:
        demand: Demand to meet (may be negative; NaN dispatches nothing)
        producers: Producers in insertion order

    Returns:
        One DispatchStep per producer, in merit order
    """
    if is_nan(demand):
        return []

    steps: List[DispatchStep] = []
    remaining = demand
    for producer in merit_order(producers):
        contribution = min(remaining, producer.production)
        remaining -= contribution
        steps.append(
            DispatchStep(
                producer_name=producer.name,
                cost=producer.cost,
                contribution=contribution,
            )
        )

    logger.debug(
        "Dispatched demand %s over %d producers, %s left unmet",
        demand,
        len(steps),
        max(remaining, 0),
    )
    return steps


def demand_cost(demand: Number, producers: Sequence[Dispatchable]) -> Number:
    """
    Cost of meeting demand under merit-order dispatch.

    Args:
        demand: Demand to meet
        producers: Producers in insertion order

    Returns:
        Sum of contribution * cost over the dispatch, or NaN for NaN demand
    """
    if is_nan(demand):
        return demand
    return sum(step.step_cost for step in dispatch_demand(demand, producers))
