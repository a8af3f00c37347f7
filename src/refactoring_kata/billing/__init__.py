"""
Billing - Theatre invoice statements.

Entry points:
    statement(invoice, plays)       -> plain-text bill
    html_statement(invoice, plays)  -> HTML bill
"""

from refactoring_kata.billing.calculators import (
    CALCULATORS,
    DEFAULT_PRICING,
    ComedyCalculator,
    PerformanceCalculator,
    PerformanceCharge,
    PricingConfig,
    TragedyCalculator,
    UnknownPlayTypeError,
    create_performance_calculator,
)
from refactoring_kata.billing.entry_points import html_statement, statement
from refactoring_kata.billing.renderers import render_html, render_plain_text
from refactoring_kata.billing.statement_builder import (
    UnknownPlayReferenceError,
    create_statement_data,
    enrich_performance,
    play_for,
)

__all__ = [
    # Entry points
    "statement",
    "html_statement",
    # Calculators
    "PricingConfig",
    "DEFAULT_PRICING",
    "PerformanceCharge",
    "PerformanceCalculator",
    "TragedyCalculator",
    "ComedyCalculator",
    "CALCULATORS",
    "create_performance_calculator",
    "UnknownPlayTypeError",
    # Assembly
    "create_statement_data",
    "enrich_performance",
    "play_for",
    "UnknownPlayReferenceError",
    # Rendering
    "render_plain_text",
    "render_html",
]
