"""
Province production-economics model.

Province, Producer and merit-order dispatch.
"""

from refactoring_kata.province.dispatch import (
    DispatchStep,
    demand_cost,
    dispatch_demand,
    merit_order,
)
from refactoring_kata.province.producer import Producer
from refactoring_kata.province.province import Province, total_production_of

__all__ = [
    "Province",
    "Producer",
    "DispatchStep",
    "merit_order",
    "dispatch_demand",
    "demand_cost",
    "total_production_of",
]
