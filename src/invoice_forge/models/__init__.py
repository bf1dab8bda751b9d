"""
Data models and serialization helpers for Invoice Forge.

This package provides:
- Invoice domain models (Invoice, LineItem, Totals)
- The normalizer that turns untrusted payloads into Invoices
- Load results reported by the share-link, store and import boundaries

All models use Python dataclasses.
"""

from invoice_forge.models.common import LoadOutcome, LoadResult
from invoice_forge.models.invoice import (
    DEFAULT_CURRENCY,
    DUE_IN_DAYS,
    Invoice,
    LineItem,
    Totals,
    default_line_item,
    normalize_invoice,
    serialize_invoice,
    serialize_line_item,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "DUE_IN_DAYS",
    "Invoice",
    "LineItem",
    "LoadOutcome",
    "LoadResult",
    "Totals",
    "default_line_item",
    "normalize_invoice",
    "serialize_invoice",
    "serialize_line_item",
]
