"""
JSON export and import of invoices.

Exports are the canonical JSON object, pretty printed. Imports accept
untrusted text or files and always produce an invoice: anything that
cannot be read falls back to the example with a status message.
"""

from datetime import date
from pathlib import Path

from invoice_forge.data import example_invoice
from invoice_forge.errors import InvoiceError, MalformedInput, ParseFailure
from invoice_forge.lib import logs, objects
from invoice_forge.models import (
    Invoice,
    LoadOutcome,
    LoadResult,
    normalize_invoice,
    serialize_invoice,
)

LOG = logs.logger(__file__)

STATUS_IMPORTED = "Imported invoice from file."
STATUS_IMPORT_FAILED = "Could not import invoice: the file is not valid invoice JSON."


def parse_invoice_text(text: object, *, today: date | None = None) -> Invoice:
    """
    Parse canonical JSON text into a normalized invoice.

    Args:
        text: JSON text, as str or UTF-8 bytes.
        today: Reference day for date defaults.

    Raises:
        ParseFailure: The value is not text or not valid JSON.
        MalformedInput: The JSON is valid but not an object.
    """
    if not isinstance(text, (str, bytes)):
        raise ParseFailure(f"Expected JSON text, got {type(text).__name__}")
    try:
        payload = objects.from_json(text)
    except (ValueError, RecursionError) as exc:
        raise ParseFailure(f"Invalid invoice JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise MalformedInput(
            f"Invoice JSON is {type(payload).__name__}, expected an object"
        )
    return normalize_invoice(payload, today=today)


def export_invoice_json(invoice: Invoice, indent: int | None = 2) -> str:
    """Return the invoice as canonical JSON text."""
    return objects.to_json(serialize_invoice(invoice), indent=indent)


def import_invoice_json(text: object, *, today: date | None = None) -> LoadResult:
    """
    Import an invoice from JSON text, falling back to the example.

    Args:
        text: Untrusted JSON text.
        today: Reference day for date defaults.

    Returns:
        LoadResult with outcome LOADED or FAILED.
    """
    try:
        invoice = parse_invoice_text(text, today=today)
    except InvoiceError as exc:
        LOG.warning("import_invoice_json - falling back to example: %s", exc)
        return LoadResult(
            example_invoice(today), LoadOutcome.FAILED, STATUS_IMPORT_FAILED
        )
    return LoadResult(invoice, LoadOutcome.LOADED, STATUS_IMPORTED)


def export_invoice_file(invoice: Invoice, path: str | Path) -> Path:
    """Write the invoice as JSON to path and return the resolved path."""
    target = Path(path)
    target.write_text(export_invoice_json(invoice) + "\n", encoding="utf-8")
    LOG.info("export_invoice_file - path:%s", target)
    return target


def import_invoice_file(path: str | Path, *, today: date | None = None) -> LoadResult:
    """
    Import an invoice from a JSON file.

    A missing file reports MISSING; an unreadable or invalid file reports
    FAILED. Both fall back to the example invoice.
    """
    source = Path(path)
    try:
        raw = source.read_bytes()
    except FileNotFoundError:
        LOG.warning("import_invoice_file - not found: %s", source)
        return LoadResult(
            example_invoice(today),
            LoadOutcome.MISSING,
            f"No invoice file found at {source}.",
        )
    except OSError as exc:
        LOG.warning("import_invoice_file - unreadable %s: %s", source, exc)
        return LoadResult(
            example_invoice(today), LoadOutcome.FAILED, STATUS_IMPORT_FAILED
        )
    return import_invoice_json(raw, today=today)
