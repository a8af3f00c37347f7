"""
Core math modules

Numeric coercion and currency formatting shared by both models.
"""

# Numerical Safeguards
from refactoring_kata.core.math.numerical_safeguards import (
    NAN,
    Number,
    is_nan,
    parse_int,
    parse_production,
)

# Currency
from refactoring_kata.core.math.currency import (
    CENTS_PER_DOLLAR,
    CURRENCY_SYMBOL,
    cents_to_dollars,
    usd,
)

__all__ = [
    # Numerical Safeguards
    "NAN",
    "Number",
    "is_nan",
    "parse_int",
    "parse_production",
    # Currency
    "CENTS_PER_DOLLAR",
    "CURRENCY_SYMBOL",
    "cents_to_dollars",
    "usd",
]
