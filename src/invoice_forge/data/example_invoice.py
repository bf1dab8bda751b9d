"""
Built-in example invoice.

Used as the starting document and as the fallback whenever a share link,
saved snapshot or import cannot be read. Built fresh on every call so no
caller can mutate what another one sees.
"""

from datetime import date

from invoice_forge.lib.ids import new_item_id
from invoice_forge.models.invoice import DUE_IN_DAYS, Invoice, normalize_invoice
from invoice_forge.utils import iso_date


def example_payload(today: date | None = None) -> dict:
    """Return the example invoice as a canonical JSON dictionary."""
    return {
        "fromName": "Acme Studio LLC",
        "fromAddress": "1-2-3 Shibuya\nTokyo, Japan",
        "billToName": "Client Co.",
        "billToAddress": "500 Market St\nSan Francisco, CA",
        "invoiceNumber": "INV-1007",
        "issueDate": iso_date(0, today),
        "dueDate": iso_date(DUE_IN_DAYS, today),
        "currency": "USD",
        "taxRatePct": 10,
        "notes": (
            "Thank you for your business. Please include the invoice number "
            "on your payment reference."
        ),
        "items": [
            {
                "id": new_item_id(),
                "description": "Landing page design (Figma)",
                "quantity": 1,
                "unitPrice": 900,
            },
            {
                "id": new_item_id(),
                "description": "Implementation (Next.js)",
                "quantity": 10,
                "unitPrice": 90,
            },
        ],
    }


def example_invoice(today: date | None = None) -> Invoice:
    """Return a freshly normalized copy of the example invoice."""
    return normalize_invoice(example_payload(today), today=today)
