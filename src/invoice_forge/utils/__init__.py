"""Utility functions shared across the invoice_forge package."""

from invoice_forge.utils.invoice_helpers import format_currency, is_number, iso_date

__all__ = [
    "format_currency",
    "is_number",
    "iso_date",
]
