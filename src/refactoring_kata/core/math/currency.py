"""
Currency - USD Formatting

Amounts are carried as integer cents everywhere. This module renders them
in US-English currency style: "$" prefix, thousands grouping and exactly
two fractional digits.

Decimal arithmetic keeps the rendering exact for any integer amount.
"""

from decimal import Decimal
from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

CENTS_PER_DOLLAR: Final[int] = 100

CURRENCY_SYMBOL: Final[str] = "$"


# =============================================================================
# FORMATTING
# =============================================================================


def cents_to_dollars(cents: int) -> Decimal:
    """
    Exact conversion of integer cents to dollars.

    Args:
        cents: Amount in cents

    Returns:
        Decimal dollars (e.g. 40500 -> Decimal("405"))
    """
    return Decimal(cents) / CENTS_PER_DOLLAR


def usd(cents: int) -> str:
    """
    Format integer cents as US dollars.

    Args:
        cents: Amount in cents

    Returns:
        Formatted string

    Examples:
        >>> usd(40500)
        '$405.00'
        >>> usd(123456789)
        '$1,234,567.89'
        >>> usd(-100)
        '-$1.00'
    """
    dollars = cents_to_dollars(cents)
    sign = "-" if dollars < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(dollars):,.2f}"
