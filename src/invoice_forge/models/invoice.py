"""
Invoice domain models, normalization and serialization helpers.

This module defines the invoice data structures and the canonical JSON
shape they travel in (share links, the local store, exported files).
The hierarchy is flat:

    Invoice
    ├── parties (from/bill-to names and multi-line addresses)
    ├── metadata (number, issue/due dates, currency, tax rate, notes)
    └── LineItem[] (description, quantity, unit price)

Python attributes use snake_case; the canonical JSON keys are camelCase.
normalize_invoice is the only way untrusted data becomes an Invoice: it
checks every field individually and fills defaults, so callers never
trust the shape of a payload beyond what is checked here.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from benedict import benedict

from invoice_forge.lib import logs
from invoice_forge.lib.ids import new_item_id
from invoice_forge.utils import format_currency, is_number, iso_date

LOG = logs.logger(__file__)

DEFAULT_CURRENCY = "USD"
DUE_IN_DAYS = 14


@dataclass(slots=True)
class LineItem:
    """One billable row: description x quantity x unit price."""

    id: str
    description: str
    quantity: float
    unit_price: float


@dataclass(slots=True)
class Invoice:
    """Primary dataclass for invoices."""

    from_name: str
    from_address: str
    bill_to_name: str
    bill_to_address: str
    invoice_number: str
    issue_date: str
    due_date: str
    currency: str
    tax_rate_pct: float
    notes: str
    items: list[LineItem]


@dataclass(slots=True)
class Totals:
    """Aggregated monetary data for an invoice."""

    subtotal: float
    tax: float
    total: float
    currency: str

    def format(self, value: float) -> str:
        """Format the provided numeric value in the invoice currency."""
        return format_currency(value, self.currency)


# Attribute name -> canonical JSON key, in canonical order
INVOICE_FIELDS: dict[str, str] = {
    "from_name": "fromName",
    "from_address": "fromAddress",
    "bill_to_name": "billToName",
    "bill_to_address": "billToAddress",
    "invoice_number": "invoiceNumber",
    "issue_date": "issueDate",
    "due_date": "dueDate",
    "currency": "currency",
    "tax_rate_pct": "taxRatePct",
    "notes": "notes",
}

LINE_ITEM_FIELDS: dict[str, str] = {
    "id": "id",
    "description": "description",
    "quantity": "quantity",
    "unit_price": "unitPrice",
}


def default_line_item() -> LineItem:
    """Return the placeholder row used when a payload carries no items."""
    return LineItem(id=new_item_id(), description="Service", quantity=1, unit_price=0)


def serialize_line_item(item: LineItem) -> dict:
    """Convert a LineItem into its canonical JSON dictionary."""
    return {key: getattr(item, attr) for attr, key in LINE_ITEM_FIELDS.items()}


def serialize_invoice(invoice: Invoice) -> dict:
    """Convert an Invoice dataclass into its canonical JSON dictionary."""
    data: dict[str, Any] = {
        key: getattr(invoice, attr) for attr, key in INVOICE_FIELDS.items()
    }
    data["items"] = [serialize_line_item(item) for item in invoice.items]
    return data


def normalize_invoice(payload: Any, *, today: date | None = None) -> Invoice:
    """
    Coerce an arbitrary value into a fully populated Invoice.

    Accepts parsed JSON, any mapping, or an existing Invoice. Each field
    is checked on its own and replaced with a default when it has the
    wrong type. Unknown keys are ignored. Normalizing an already
    normalized invoice returns an equal invoice with the same item ids.

    Args:
        payload: Untrusted input, typically the result of json.loads.
        today: Reference day for the date defaults, defaults to today.

    Returns:
        An Invoice where every field has its expected type and items is
        never empty.
    """
    if isinstance(payload, Invoice):
        payload = serialize_invoice(payload)
    if not isinstance(payload, Mapping):
        LOG.debug("normalize_invoice - ignoring %s payload", type(payload).__name__)
        payload = {}

    b = benedict(dict(payload), keypath_separator=None)
    return Invoice(
        from_name=_text(b, "fromName"),
        from_address=_text(b, "fromAddress"),
        bill_to_name=_text(b, "billToName"),
        bill_to_address=_text(b, "billToAddress"),
        invoice_number=_text(b, "invoiceNumber"),
        issue_date=_text(b, "issueDate", iso_date(0, today)),
        due_date=_text(b, "dueDate", iso_date(DUE_IN_DAYS, today)),
        currency=_text(b, "currency", DEFAULT_CURRENCY),
        tax_rate_pct=_number(b, "taxRatePct", 0),
        notes=_text(b, "notes"),
        items=_normalize_items(b.get("items")),
    )


def _normalize_items(value: Any) -> list[LineItem]:
    """Coerce the items entry; falls back to a single placeholder row."""
    entries = value if isinstance(value, (list, tuple)) else []
    items = [
        _normalize_item(benedict(dict(entry), keypath_separator=None))
        for entry in entries
        if isinstance(entry, Mapping)
    ]
    if len(items) < len(entries):
        LOG.debug(
            "_normalize_items - dropped %s non-object entries",
            len(entries) - len(items),
        )
    return items or [default_line_item()]


def _normalize_item(b: benedict) -> LineItem:
    item_id = b.get("id")
    return LineItem(
        id=item_id if isinstance(item_id, str) else new_item_id(),
        description=_text(b, "description"),
        quantity=_number(b, "quantity", 1),
        unit_price=_number(b, "unitPrice", 0),
    )


def _text(b: benedict, key: str, default: str = "") -> str:
    value = b.get(key)
    return value if isinstance(value, str) else default


def _number(b: benedict, key: str, default: float) -> float:
    value = b.get(key)
    return value if is_number(value) else default
