"""
Exceptions raised while reading invoices from untrusted text.

None of these are fatal. Every entry point that accepts share links,
stored snapshots or imported files catches InvoiceError and falls back
to the example invoice with a status message.
"""


class InvoiceError(Exception):
    """Base class for invoice ingestion failures."""


class DecodeFailure(InvoiceError):
    """A share-link token could not be decoded at some pipeline stage."""


class ParseFailure(InvoiceError):
    """Text from storage or an import is not valid JSON."""


class MalformedInput(InvoiceError):
    """Well-formed JSON that is not an invoice object."""
