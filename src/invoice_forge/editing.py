"""
Edit operations on an invoice value.

Every operation returns a new Invoice built with dataclasses.replace and
leaves its input untouched, so a caller holding the current invoice just
swaps in the result. Items keep their ids across edits.
"""

from dataclasses import replace
from typing import Any

from invoice_forge.lib import logs
from invoice_forge.lib.ids import new_item_id
from invoice_forge.models.invoice import (
    INVOICE_FIELDS,
    LINE_ITEM_FIELDS,
    Invoice,
    LineItem,
)

LOG = logs.logger(__file__)


def update_field(invoice: Invoice, name: str, value: Any) -> Invoice:
    """
    Return a copy of the invoice with one top-level field changed.

    Args:
        invoice: Current invoice.
        name: Attribute name such as ``bill_to_name``. Items are edited
            through the item operations instead.
        value: New value, stored as given.

    Raises:
        ValueError: The name is not an editable invoice field.
    """
    if name not in INVOICE_FIELDS:
        raise ValueError(f"Unknown invoice field: {name}")
    return replace(invoice, **{name: value})


def add_item(
    invoice: Invoice,
    description: str = "",
    quantity: float = 1,
    unit_price: float = 0,
) -> Invoice:
    """Return a copy of the invoice with a new row appended."""
    item = LineItem(
        id=new_item_id(),
        description=description,
        quantity=quantity,
        unit_price=unit_price,
    )
    return replace(invoice, items=[*invoice.items, item])


def update_item(invoice: Invoice, item_id: str, **changes: Any) -> Invoice:
    """
    Return a copy of the invoice with the matching row patched.

    Unknown ids leave the items unchanged.

    Args:
        invoice: Current invoice.
        item_id: Id of the row to patch.
        **changes: description, quantity and/or unit_price.

    Raises:
        ValueError: A change names something other than an editable
            item attribute. The id itself cannot be changed.
    """
    invalid = [key for key in changes if key not in LINE_ITEM_FIELDS or key == "id"]
    if invalid:
        raise ValueError(f"Cannot update line item fields: {', '.join(invalid)}")
    items = [
        replace(item, **changes) if item.id == item_id else item
        for item in invoice.items
    ]
    return replace(invoice, items=items)


def remove_item(invoice: Invoice, item_id: str) -> Invoice:
    """
    Return a copy of the invoice without the matching row.

    Rows sharing the id are all removed, unless that would leave no rows:
    items always stays non-empty.
    """
    items = [item for item in invoice.items if item.id != item_id]
    if not items:
        LOG.debug("remove_item - keeping last item %s", item_id)
        return replace(invoice, items=list(invoice.items))
    return replace(invoice, items=items)


def find_item(invoice: Invoice, item_id: str) -> LineItem | None:
    """Return the row with the given id, or None."""
    return next((item for item in invoice.items if item.id == item_id), None)
