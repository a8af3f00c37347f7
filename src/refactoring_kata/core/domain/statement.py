"""
Statement - Assembled bill

A Statement is the complete, render-ready view of an invoice: every
performance carries its resolved play, amount and volume credits, and the
totals are computed once. Renderers read nothing else.

Amounts are integer cents.
"""

from pydantic import BaseModel, ConfigDict, Field

from .play import Performance, Play


class EnrichedPerformance(Performance):
    """Performance with its play, amount (cents) and volume credits."""

    play: Play
    amount: int = Field(..., description="Charge in cents")
    volume_credits: int = Field(..., description="Loyalty credits earned")


class Statement(BaseModel):
    """
    Assembled statement for one invoice.

    Invariants:
        total_amount == sum(p.amount for p in performances)
        total_volume_credits == sum(p.volume_credits for p in performances)
    """

    customer: str
    performances: tuple[EnrichedPerformance, ...] = ()
    total_amount: int = Field(..., description="Sum of performance amounts (cents)")
    total_volume_credits: int = Field(..., description="Sum of volume credits")

    model_config = ConfigDict(frozen=True)
