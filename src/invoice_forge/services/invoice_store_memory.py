"""
In-memory implementation of InvoiceStore.

Useful for tests and throwaway sessions where nothing should touch disk.
The slot lives only as long as the store instance.
"""

from invoice_forge.services.invoice_store import InvoiceStore


class MemoryInvoiceStore(InvoiceStore):
    """Saved-invoice slot held in a plain dictionary."""

    def __init__(self, initial: object | None = None) -> None:
        """
        Initialize the store.

        Args:
            initial: Optional raw value to seed the slot with.
        """
        self._data: dict[str, object] = {}
        if initial is not None:
            self._data[self.key] = initial

    def read_raw(self) -> object | None:
        return self._data.get(self.key)

    def write_raw(self, text: str) -> None:
        self._data[self.key] = text

    def clear(self) -> None:
        self._data.pop(self.key, None)
