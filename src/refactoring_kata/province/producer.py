"""
Producer - A single source of supply within a province

A producer belongs to exactly one province. Every change to its
production is reported to the owner so the province's cached total
stays equal to the sum over its producers.
"""

from typing import TYPE_CHECKING, Union

from refactoring_kata.core.math import Number, parse_int, parse_production

if TYPE_CHECKING:
    from .province import Province


class Producer:
    """
    Producer with a marginal cost and a current production quantity.

    Setters accept integers or text. Text is coerced with the shared
    numeric rules: unparseable production becomes 0, unparseable cost
    becomes NaN.
    """

    def __init__(self, province: "Province", name: str, cost: Number, production: int = 0):
        self._province = province
        self._name = name
        self._cost = cost
        self._production = production or 0

    def __repr__(self) -> str:
        return f"Producer(name={self._name!r}, cost={self._cost!r}, production={self._production!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def province(self) -> "Province":
        return self._province

    @property
    def cost(self) -> Number:
        return self._cost

    @cost.setter
    def cost(self, value: Union[int, str]) -> None:
        self._cost = parse_int(value)

    @property
    def production(self) -> int:
        return self._production

    @production.setter
    def production(self, value: Union[int, str]) -> None:
        new_production = parse_production(value)
        self._province._apply_production_change(new_production - self._production)
        self._production = new_production
