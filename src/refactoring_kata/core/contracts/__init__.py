"""
Contract Validation Module

JSON Schema validation of the sample documents (plays, invoices, province).
"""

from .validators import (
    ContractValidator,
    InvoicesValidator,
    InvoiceValidator,
    PlaysValidator,
    ProvinceValidator,
    SchemaLoader,
    validate_invoice,
    validate_invoices,
    validate_plays,
    validate_province,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PlaysValidator",
    "InvoiceValidator",
    "InvoicesValidator",
    "ProvinceValidator",
    # Functions
    "validate_plays",
    "validate_invoice",
    "validate_invoices",
    "validate_province",
]
