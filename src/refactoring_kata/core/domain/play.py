"""
Play, Performance, Invoice - Billing input models

Immutable Pydantic models for the theatre invoice and the plays catalogue.

The catalogue keeps `type` as free text: the set of known play types is
enforced by the calculator factory (billing.calculators), which reports
an unknown type by name.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================


class PlayType(str, Enum):
    """Play types with a pricing rule"""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"


# =============================================================================
# CATALOGUE
# =============================================================================


class Play(BaseModel):
    """
    A play from the catalogue.

    `type` is matched against PlayType when a calculator is built.
    """

    name: str = Field(..., description="Display name, e.g. 'Hamlet'")
    type: str = Field(..., description="Play type, e.g. 'tragedy'")

    model_config = ConfigDict(frozen=True)


# =============================================================================
# INVOICE
# =============================================================================


class Performance(BaseModel):
    """A single performance on an invoice."""

    play_id: str = Field(..., alias="playID", description="Catalogue key of the play")
    audience: int = Field(..., description="Number of seats sold")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Invoice(BaseModel):
    """
    Invoice for one customer.

    Performances keep their input order; the statement lists them in
    the same order.
    """

    customer: str = Field(..., description="Customer name")
    performances: tuple[Performance, ...] = Field(
        default=(), description="Performances billed on this invoice"
    )

    model_config = ConfigDict(frozen=True)
