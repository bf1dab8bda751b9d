"""
Static and example data for Invoice Forge.

Modules:
- example_invoice: Pure constructor for the built-in example invoice
"""

from invoice_forge.data.example_invoice import example_invoice, example_payload

__all__ = ["example_invoice", "example_payload"]
