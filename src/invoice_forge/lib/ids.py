"""Identifier generation for line items."""

import uuid


def new_item_id() -> str:
    """
    Return a fresh line item identifier.

    Identifiers only key rows within one in-memory invoice, so a random
    UUID is plenty. Never use them for anything security related.
    """
    return uuid.uuid4().hex[:16]
