"""
Domain models and value objects.

Contains the billing entities: Play, Performance, Invoice, Statement.
"""

from refactoring_kata.core.domain.play import Invoice, Performance, Play, PlayType
from refactoring_kata.core.domain.statement import EnrichedPerformance, Statement

__all__ = [
    # Catalogue / invoice
    "PlayType",
    "Play",
    "Performance",
    "Invoice",
    # Statement
    "EnrichedPerformance",
    "Statement",
]
