"""
Province - Demand, price and producers of one market

Derived quantities:
    shortfall        = demand - total_production
    satisfied_demand = min(demand, total_production)
    demand_value     = satisfied_demand * price
    demand_cost      = merit-order dispatch cost (see dispatch.py)
    profit           = demand_value - demand_cost

A NaN demand (unparseable text) makes shortfall, satisfied_demand,
demand_value, demand_cost and profit NaN.

A Province is mutable in place and owned by a single caller.
"""

import logging
from typing import Any, List, Mapping, Sequence, Union

from refactoring_kata.core.math import NAN, Number, is_nan, parse_int

from .dispatch import DispatchStep, demand_cost, dispatch_demand
from .producer import Producer

logger = logging.getLogger(__name__)


class Province:
    """
    Province with its producers.

    INVARIANT: total_production == sum(p.production for p in producers),
    maintained through Producer.production writes.
    """

    def __init__(self, name: str, demand: Number, price: Number):
        self._name = name
        self._producers: List[Producer] = []
        self._total_production = 0
        self._demand = demand
        self._price = price

    @classmethod
    def from_doc(cls, doc: Mapping[str, Any]) -> "Province":
        """
        Build a province from a document.

        Args:
            doc: Mapping with name, demand, price and producers
                 (each producer: name, cost, optional production)

        Returns:
            Province with producers in document order
        """
        province = cls(name=doc["name"], demand=doc["demand"], price=doc["price"])
        for data in doc.get("producers", ()):
            province.add_producer(
                Producer(
                    province,
                    name=data["name"],
                    cost=data["cost"],
                    production=data.get("production") or 0,
                )
            )
        return province

    def __repr__(self) -> str:
        return (
            f"Province(name={self._name!r}, demand={self._demand!r}, "
            f"price={self._price!r}, producers={len(self._producers)})"
        )

    # ── Producers ────────────────────────────────────────────────

    def add_producer(self, producer: Producer) -> None:
        if producer.province is not self:
            raise ValueError(f"Producer {producer.name!r} belongs to another province")
        self._producers.append(producer)
        self._total_production += producer.production

    def _apply_production_change(self, delta: int) -> None:
        self._total_production += delta

    @property
    def producers(self) -> List[Producer]:
        """Snapshot of the producers in insertion order."""
        return list(self._producers)

    @property
    def total_production(self) -> int:
        return self._total_production

    # ── Attributes ───────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def demand(self) -> Number:
        return self._demand

    @demand.setter
    def demand(self, value: Union[int, str]) -> None:
        self._demand = parse_int(value)

    @property
    def price(self) -> Number:
        return self._price

    @price.setter
    def price(self, value: Union[int, str]) -> None:
        self._price = parse_int(value)

    # ── Derived quantities ───────────────────────────────────────

    @property
    def shortfall(self) -> Number:
        return self._demand - self._total_production

    @property
    def satisfied_demand(self) -> Number:
        if is_nan(self._demand):
            return NAN
        return min(self._demand, self._total_production)

    @property
    def demand_value(self) -> Number:
        return self.satisfied_demand * self._price

    @property
    def demand_cost(self) -> Number:
        return demand_cost(self._demand, self._producers)

    @property
    def profit(self) -> Number:
        return self.demand_value - self.demand_cost

    def dispatch(self) -> List[DispatchStep]:
        """Merit-order allocation of the current demand."""
        return dispatch_demand(self._demand, self._producers)


def total_production_of(producers: Sequence[Producer]) -> int:
    """Arithmetic sum of production over producers."""
    return sum(p.production for p in producers)
