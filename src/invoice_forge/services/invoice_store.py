"""
Abstract base class defining the saved-invoice slot contract.

A store holds at most one invoice, the last one saved, as canonical JSON
text under a single named key. Subclasses only move raw text in and out;
this base class owns serialization, normalization and the distinction
between "nothing saved" and "saved data is corrupt".

Implementations:
- DiskInvoiceStore: diskcache-backed slot that survives restarts
- MemoryInvoiceStore: Process-local slot for tests and previews
"""

from abc import ABC, abstractmethod
from datetime import date

from invoice_forge.data import example_invoice
from invoice_forge.errors import InvoiceError
from invoice_forge.exchange import parse_invoice_text
from invoice_forge.lib import logs, objects
from invoice_forge.models import Invoice, LoadOutcome, LoadResult, serialize_invoice

LOG = logs.logger(__file__)

STORAGE_KEY = "invoice_forge:last:v1"

STATUS_SAVED = "Saved invoice."
STATUS_LOADED = "Loaded saved invoice."
STATUS_MISSING = "No saved invoice found."
STATUS_CORRUPT = "Saved data was corrupted."


class InvoiceStore(ABC):
    """
    Abstract base class for the saved-invoice slot.

    Subclasses implement the raw text accessors; save() and load() are
    shared.
    """

    key: str = STORAGE_KEY

    @abstractmethod
    def read_raw(self) -> object | None:
        """Return the stored value for the slot, or None when empty."""

    @abstractmethod
    def write_raw(self, text: str) -> None:
        """Replace the stored value for the slot."""

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored value, if any."""

    def close(self) -> None:
        """Release any resources held by the store."""

    def __enter__(self) -> "InvoiceStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def save(self, invoice: Invoice) -> str:
        """
        Persist the invoice as canonical JSON text.

        Returns:
            Status message for the caller to display.
        """
        self.write_raw(objects.to_json(serialize_invoice(invoice)))
        LOG.info("save - key:%s items:%s", self.key, len(invoice.items))
        return STATUS_SAVED

    def load(self, *, today: date | None = None) -> LoadResult:
        """
        Load the saved invoice, falling back to the example.

        Never raises for bad data: an empty slot reports MISSING and
        unreadable content reports FAILED, both with the example invoice.
        """
        raw = self.read_raw()
        if raw is None:
            LOG.info("load - key:%s empty", self.key)
            return LoadResult(
                example_invoice(today), LoadOutcome.MISSING, STATUS_MISSING
            )
        try:
            invoice = parse_invoice_text(raw, today=today)
        except InvoiceError as exc:
            LOG.warning("load - key:%s corrupt: %s", self.key, exc)
            return LoadResult(
                example_invoice(today), LoadOutcome.FAILED, STATUS_CORRUPT
            )
        return LoadResult(invoice, LoadOutcome.LOADED, STATUS_LOADED)
