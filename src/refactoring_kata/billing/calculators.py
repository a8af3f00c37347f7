"""
Performance Calculators - Amount and volume credits per play type

Pricing table (amounts in cents):

    tragedy: amount  = 40000 + 1000 * (audience - 30)   if audience > 30
             credits = max(audience - 30, 0)

    comedy:  amount  = 30000 + 10000 + 500 * (audience - 20)   if audience > 20
                       + 300 * audience
             credits = max(audience - 30, 0) + floor(audience / 5)

The calculator is selected by play.type through create_performance_calculator.
All arithmetic is integer.
"""

from dataclasses import dataclass
from typing import Dict, Final, Optional, Type

from refactoring_kata.core.domain import Performance, Play, PlayType


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownPlayTypeError(ValueError):
    """A play's type has no pricing rule."""

    def __init__(self, play_type: str):
        self.play_type = play_type
        super().__init__(f"unknown type: {play_type}")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PricingConfig:
    """Tariff constants. Amounts are in cents."""

    # Volume credits (all play types)
    credits_audience_threshold: int = 30

    # Tragedy
    tragedy_base_amount: int = 40000
    tragedy_audience_threshold: int = 30
    tragedy_amount_per_extra_seat: int = 1000

    # Comedy
    comedy_base_amount: int = 30000
    comedy_audience_threshold: int = 20
    comedy_threshold_bonus: int = 10000
    comedy_amount_per_extra_seat: int = 500
    comedy_amount_per_seat: int = 300
    comedy_credit_audience_divisor: int = 5


DEFAULT_PRICING: Final[PricingConfig] = PricingConfig()


@dataclass(frozen=True)
class PerformanceCharge:
    """Result of pricing one performance."""

    amount: int
    volume_credits: int


# =============================================================================
# CALCULATORS
# =============================================================================


class PerformanceCalculator:
    """
    Base calculator for one performance of one play.

    Subclasses provide `amount`; `volume_credits` defaults to the credits
    earned above the audience threshold.
    """

    def __init__(
        self,
        performance: Performance,
        play: Play,
        config: Optional[PricingConfig] = None,
    ):
        self.performance = performance
        self.play = play
        self.config = config or DEFAULT_PRICING

    @property
    def amount(self) -> int:
        raise NotImplementedError("subclass responsibility")

    @property
    def volume_credits(self) -> int:
        return max(self.performance.audience - self.config.credits_audience_threshold, 0)

    def charge(self) -> PerformanceCharge:
        return PerformanceCharge(amount=self.amount, volume_credits=self.volume_credits)


class TragedyCalculator(PerformanceCalculator):
    @property
    def amount(self) -> int:
        cfg = self.config
        audience = self.performance.audience
        result = cfg.tragedy_base_amount
        if audience > cfg.tragedy_audience_threshold:
            result += cfg.tragedy_amount_per_extra_seat * (audience - cfg.tragedy_audience_threshold)
        return result


class ComedyCalculator(PerformanceCalculator):
    @property
    def amount(self) -> int:
        cfg = self.config
        audience = self.performance.audience
        result = cfg.comedy_base_amount
        if audience > cfg.comedy_audience_threshold:
            result += cfg.comedy_threshold_bonus + cfg.comedy_amount_per_extra_seat * (
                audience - cfg.comedy_audience_threshold
            )
        result += cfg.comedy_amount_per_seat * audience
        return result

    @property
    def volume_credits(self) -> int:
        # Floor division: audience counts are whole seats
        return super().volume_credits + self.performance.audience // self.config.comedy_credit_audience_divisor


CALCULATORS: Final[Dict[PlayType, Type[PerformanceCalculator]]] = {
    PlayType.TRAGEDY: TragedyCalculator,
    PlayType.COMEDY: ComedyCalculator,
}


def create_performance_calculator(
    performance: Performance,
    play: Play,
    config: Optional[PricingConfig] = None,
) -> PerformanceCalculator:
    """
    Build the calculator for a play's type.

    Args:
        performance: Performance to price
        play: Resolved play from the catalogue
        config: Tariff constants (default: DEFAULT_PRICING)

    Returns:
        Calculator for the play type

    Raises:
        UnknownPlayTypeError: If play.type has no pricing rule
    """
    try:
        play_type = PlayType(play.type)
    except ValueError:
        raise UnknownPlayTypeError(play.type) from None

    return CALCULATORS[play_type](performance, play, config)
