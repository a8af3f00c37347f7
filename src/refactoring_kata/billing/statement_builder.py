"""
Statement Builder - Invoice + catalogue -> Statement

Assembly stage of the billing pipeline: every performance is resolved
against the plays catalogue, priced by its calculator, and the totals are
summed. The resulting Statement is all the renderers need.

Inputs may be pydantic models or plain documents (the JSON shape with
`playID` keys).
"""

import logging
from typing import Any, Mapping, Optional, Union

from refactoring_kata.core.domain import (
    EnrichedPerformance,
    Invoice,
    Performance,
    Play,
    Statement,
)

from .calculators import PricingConfig, create_performance_calculator

logger = logging.getLogger(__name__)

InvoiceLike = Union[Invoice, Mapping[str, Any]]
PlaysLike = Mapping[str, Union[Play, Mapping[str, Any]]]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownPlayReferenceError(LookupError):
    """A performance refers to a playID missing from the catalogue."""

    def __init__(self, play_id: str):
        self.play_id = play_id
        super().__init__(f"unknown play reference: {play_id}")


# =============================================================================
# INPUT NORMALISATION
# =============================================================================


def coerce_invoice(invoice: InvoiceLike) -> Invoice:
    if isinstance(invoice, Invoice):
        return invoice
    return Invoice.model_validate(invoice)


def coerce_plays(plays: PlaysLike) -> dict[str, Play]:
    return {
        play_id: play if isinstance(play, Play) else Play.model_validate(play)
        for play_id, play in plays.items()
    }


# =============================================================================
# ASSEMBLY
# =============================================================================


def play_for(performance: Performance, plays: Mapping[str, Play]) -> Play:
    """
    Resolve the play of a performance.

    Raises:
        UnknownPlayReferenceError: If the playID is not in the catalogue
    """
    try:
        return plays[performance.play_id]
    except KeyError:
        raise UnknownPlayReferenceError(performance.play_id) from None


def enrich_performance(
    performance: Performance,
    plays: Mapping[str, Play],
    config: Optional[PricingConfig] = None,
) -> EnrichedPerformance:
    """Attach play, amount and volume credits to a performance."""
    calculator = create_performance_calculator(performance, play_for(performance, plays), config)
    charge = calculator.charge()
    return EnrichedPerformance(
        play_id=performance.play_id,
        audience=performance.audience,
        play=calculator.play,
        amount=charge.amount,
        volume_credits=charge.volume_credits,
    )


def create_statement_data(
    invoice: InvoiceLike,
    plays: PlaysLike,
    config: Optional[PricingConfig] = None,
) -> Statement:
    """
    Assemble the statement for an invoice.

    Args:
        invoice: Invoice model or document
        plays: Catalogue mapping playID -> Play (model or document)
        config: Tariff constants (default: DEFAULT_PRICING)

    Returns:
        Statement with performances in invoice order and summed totals

    Raises:
        UnknownPlayReferenceError: If a playID is missing from the catalogue
        UnknownPlayTypeError: If a play type has no pricing rule
    """
    invoice = coerce_invoice(invoice)
    catalogue = coerce_plays(plays)

    performances = tuple(enrich_performance(p, catalogue, config) for p in invoice.performances)
    total_amount = sum(p.amount for p in performances)
    total_volume_credits = sum(p.volume_credits for p in performances)

    logger.debug(
        "Assembled statement for %s: %d performances, %d cents, %d credits",
        invoice.customer,
        len(performances),
        total_amount,
        total_volume_credits,
    )

    return Statement(
        customer=invoice.customer,
        performances=performances,
        total_amount=total_amount,
        total_volume_credits=total_volume_credits,
    )
