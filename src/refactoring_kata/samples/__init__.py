"""
Sample documents used by the test-suite.

Each loader reads a packaged JSON file, checks it against its contract and
returns a fresh copy, so callers may mutate the result freely.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from refactoring_kata.core.contracts import validate_invoices, validate_plays, validate_province

_SAMPLES_DIR = Path(__file__).parent


def _load(filename: str) -> Any:
    with open(_SAMPLES_DIR / filename, "r", encoding="utf-8") as f:
        return json.load(f)


def sample_province_data() -> Dict[str, Any]:
    """The Asia province: three producers, demand 30, price 20."""
    data = _load("asia.json")
    validate_province(data)
    return data


def sample_plays() -> Dict[str, Dict[str, str]]:
    data = _load("plays.json")
    validate_plays(data)
    return data


def sample_invoices() -> List[Dict[str, Any]]:
    data = _load("invoices.json")
    validate_invoices(data)
    return data


__all__ = [
    "sample_province_data",
    "sample_plays",
    "sample_invoices",
]
