"""
Renderers - Statement -> text

Both renderers read only the Statement. Layouts are fixed; play names and
customer are emitted as given.
"""

from refactoring_kata.core.domain import Statement
from refactoring_kata.core.math import usd


def render_plain_text(data: Statement) -> str:
    result = f"Statement for {data.customer}\n"
    for perf in data.performances:
        result += f" {perf.play.name}: {usd(perf.amount)} ({perf.audience} seats)\n"
    result += f"Amount owed is {usd(data.total_amount)}\n"
    result += f"You earned {data.total_volume_credits} credits\n"
    return result


def render_html(data: Statement) -> str:
    result = f"<h1>Statement for {data.customer}</h1>\n"
    result += "<table>\n"
    # Header row carries no trailing newline
    result += "<tr><th>play</th><th>seats</th><th>cost</th></tr>"
    for perf in data.performances:
        result += f" <tr><td>{perf.play.name}</td><td>{perf.audience}</td>"
        result += f"<td>{usd(perf.amount)}</td></tr>\n"
    result += "</table>\n"
    result += f"<p>Amount owed is <em>{usd(data.total_amount)}</em></p>\n"
    result += f"<p>You earned <em>{data.total_volume_credits}</em> credits</p>\n"
    return result
