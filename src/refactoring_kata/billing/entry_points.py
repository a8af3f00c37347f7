"""
Billing entry points

    statement(invoice, plays)       -> plain-text bill
    html_statement(invoice, plays)  -> HTML bill
"""

from .renderers import render_html, render_plain_text
from .statement_builder import InvoiceLike, PlaysLike, create_statement_data


def statement(invoice: InvoiceLike, plays: PlaysLike) -> str:
    """Plain-text statement for an invoice."""
    return render_plain_text(create_statement_data(invoice, plays))


def html_statement(invoice: InvoiceLike, plays: PlaysLike) -> str:
    """HTML statement for an invoice."""
    return render_html(create_statement_data(invoice, plays))
