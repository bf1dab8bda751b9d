"""
Invoice Forge: build, total, share and store simple invoices.

This package provides the invoice core that a form or print view calls
into: a normalized data model, totals with fixed rounding, and a
reversible URL-safe codec for share links.

Subpackages:
- models: Invoice dataclasses, normalization and load results
- services: Saved-invoice store (disk and memory implementations)
- data: Built-in example invoice
- lib: Logging, JSON and identifier helpers

Main entry points:
- models.normalize_invoice(): Turn untrusted data into an Invoice
- totals.calculate_totals(): Subtotal, tax and total
- codec.encode_token() / codec.load_shared_invoice(): Share links
- cli.main(): The ``invoice-forge`` command
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
