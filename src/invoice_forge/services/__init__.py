"""
Store factory for Invoice Forge.

This module provides the get_invoice_store() factory function that returns
the InvoiceStore implementation selected by configuration.

Available Implementations:
- disk: diskcache-backed slot under INVOICE_FORGE_STORE_DIR
- memory: Process-local slot, nothing written to disk

Configure via the INVOICE_FORGE_STORE environment variable.
"""

import os
from typing import Callable, Dict

from invoice_forge.lib import logs
from invoice_forge.services.invoice_store import STORAGE_KEY, InvoiceStore
from invoice_forge.services.invoice_store_disk import DiskInvoiceStore
from invoice_forge.services.invoice_store_memory import MemoryInvoiceStore

LOG = logs.logger(__file__)

_STORE_REGISTRY: Dict[str, Callable[[], InvoiceStore]] = {
    "disk": lambda: DiskInvoiceStore(),
    "memory": lambda: MemoryInvoiceStore(),
}


def get_invoice_store(kind: str | None = None) -> InvoiceStore:
    """Return a new store of the configured kind."""
    resolved_kind = (kind or os.getenv("INVOICE_FORGE_STORE", "disk")).lower()
    LOG.debug("get_invoice_store - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _STORE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown invoice store kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "STORAGE_KEY",
    "DiskInvoiceStore",
    "InvoiceStore",
    "MemoryInvoiceStore",
    "get_invoice_store",
]
