"""
Result models shared by the invoice ingestion boundaries.

Share links, the local store and file imports all accept untrusted text.
Each boundary reports what happened through a LoadResult so callers can
tell "nothing there" apart from "something there but unreadable" and
surface a status message, while always receiving a usable invoice.
"""

from dataclasses import dataclass
from enum import Enum

from invoice_forge.models.invoice import Invoice, serialize_invoice


class LoadOutcome(str, Enum):
    """How a load attempt ended."""

    LOADED = "loaded"
    MISSING = "missing"
    FAILED = "failed"


@dataclass
class LoadResult:
    """
    Invoice produced by a load attempt plus its outcome.

    Attributes:
        invoice: The loaded invoice, or a fresh example on fallback.
        outcome: Whether data was loaded, absent, or present but unreadable.
        status: Human readable message for the caller to display.
    """

    invoice: Invoice
    outcome: LoadOutcome
    status: str = ""

    @property
    def ok(self) -> bool:
        """True when the invoice came from the requested source."""
        return self.outcome is LoadOutcome.LOADED

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "outcome": self.outcome.value,
            "status": self.status,
            "invoice": serialize_invoice(self.invoice),
        }
