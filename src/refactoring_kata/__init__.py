"""
Refactoring kata: province production economics and theatre billing.

Two independent models:
- province: merit-order dispatch over a province's producers
- billing: invoice statements rendered as plain text or HTML
"""

from refactoring_kata.billing import html_statement, statement
from refactoring_kata.province import Producer, Province

__all__ = [
    "statement",
    "html_statement",
    "Province",
    "Producer",
]
