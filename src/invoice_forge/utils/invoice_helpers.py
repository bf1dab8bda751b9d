"""
Helper functions for invoice values and formatting.

Provides helpers for:
- Numeric type checks that match the JSON notion of a number
- ISO calendar date strings relative to a reference day
- Currency formatting for display
"""

import math
import sys
from datetime import date, timedelta
from typing import Any


def is_number(value: Any) -> bool:
    """
    Check whether a value is a usable JSON number.

    Booleans are excluded even though they subclass int, and so are NaN
    and the infinities since they have no JSON representation. Integers
    beyond float range are rejected as well.

    Args:
        value: Any value taken from an untrusted payload.

    Returns:
        True for finite ints and floats.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, int):
        return abs(value) <= sys.float_info.max
    return math.isfinite(value)


def iso_date(days: int = 0, today: date | None = None) -> str:
    """
    Return a calendar date as a ``YYYY-MM-DD`` string.

    Args:
        days: Offset in days from the reference day.
        today: Reference day, defaults to the local current date.

    Returns:
        The shifted date in ISO format.
    """
    reference = today or date.today()
    return (reference + timedelta(days=days)).isoformat()


def format_currency(value: float, currency: str) -> str:
    """
    Format a currency amount with the currency code prefix.

    Unknown or empty codes are tolerated; they only change the prefix.

    Args:
        value: Numeric amount to format.
        currency: Currency code (e.g., 'USD', 'EUR').

    Returns:
        Formatted string like 'USD 1,234.56'.
    """
    code = (currency or "").strip().upper()
    amount = f"{value:,.2f}"
    return f"{code} {amount}" if code else amount
