"""
Share-link codec for invoices.

An invoice is shared as a single URL-safe token in the ``data`` query
parameter:

    canonical JSON -> UTF-8 -> base64 -> ("+" -> "-", "/" -> "_", no "=")

Decoding reverses every step and then runs the normalizer, so the shape
of a decoded payload is never trusted. decode_token raises DecodeFailure
or MalformedInput; load_shared_invoice and load_invoice_from_url are the
total entry points that always hand back an invoice.
"""

import base64
import binascii
from datetime import date
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from invoice_forge.data import example_invoice
from invoice_forge.errors import DecodeFailure, InvoiceError, MalformedInput
from invoice_forge.lib import logs, objects
from invoice_forge.models import (
    Invoice,
    LoadOutcome,
    LoadResult,
    normalize_invoice,
    serialize_invoice,
)

LOG = logs.logger(__file__)

SHARE_PARAM = "data"

STATUS_SHARE_LOADED = "Loaded invoice from share link."
STATUS_SHARE_FAILED = "Could not read the shared invoice. Showing the example instead."


def encode_token(invoice: Invoice) -> str:
    """
    Encode an invoice as a URL-safe token without padding.

    Args:
        invoice: Invoice to share.

    Returns:
        Token made only of ``A-Z a-z 0-9 - _``.
    """
    text = objects.to_json(serialize_invoice(invoice))
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return encoded.replace("+", "-").replace("/", "_").rstrip("=")


def decode_token(token: str, *, today: date | None = None) -> Invoice:
    """
    Decode a share token back into a normalized invoice.

    Args:
        token: Token produced by encode_token, typically read from a URL.
        today: Reference day for date defaults during normalization.

    Returns:
        The normalized invoice.

    Raises:
        DecodeFailure: The token is not base64, not UTF-8, or not JSON.
        MalformedInput: The JSON is valid but not an object.
    """
    standard = token.replace("-", "+").replace("_", "/")
    padded = standard + "=" * (-len(standard) % 4)
    try:
        raw = base64.b64decode(padded, validate=True)
        text = raw.decode("utf-8")
        payload = objects.from_json(text)
    except (binascii.Error, ValueError, RecursionError) as exc:
        raise DecodeFailure(f"Share token could not be decoded: {exc}") from exc

    if not isinstance(payload, dict):
        raise MalformedInput(
            f"Share token holds {type(payload).__name__}, expected an object"
        )
    return normalize_invoice(payload, today=today)


def load_shared_invoice(token: str | None, *, today: date | None = None) -> LoadResult:
    """
    Load an invoice from a share token, falling back to the example.

    Never raises. A missing or empty token yields the example with an
    empty status; a token that cannot be decoded yields the example with
    a failure status.

    Args:
        token: Value of the ``data`` query parameter, or None if absent.
        today: Reference day for date defaults.

    Returns:
        LoadResult describing the outcome.
    """
    if not token:
        return LoadResult(example_invoice(today), LoadOutcome.MISSING)

    try:
        invoice = decode_token(token, today=today)
    except InvoiceError as exc:
        LOG.warning("load_shared_invoice - falling back to example: %s", exc)
        return LoadResult(
            example_invoice(today), LoadOutcome.FAILED, STATUS_SHARE_FAILED
        )
    except Exception as exc:
        LOG.error("load_shared_invoice - unexpected failure: %s", exc, exc_info=True)
        return LoadResult(
            example_invoice(today), LoadOutcome.FAILED, STATUS_SHARE_FAILED
        )

    LOG.debug("load_shared_invoice - loaded %s items", len(invoice.items))
    return LoadResult(invoice, LoadOutcome.LOADED, STATUS_SHARE_LOADED)


def share_url(base_url: str, invoice: Invoice) -> str:
    """
    Return base_url with the invoice token set as the ``data`` parameter.

    Other query parameters and the fragment are kept; an existing
    ``data`` parameter is replaced.
    """
    parts = urlsplit(base_url)
    query = {
        key: values
        for key, values in parse_qs(parts.query, keep_blank_values=True).items()
        if key != SHARE_PARAM
    }
    query[SHARE_PARAM] = [encode_token(invoice)]
    return urlunsplit(parts._replace(query=urlencode(query, doseq=True)))


def token_from_url(url: str) -> str | None:
    """Return the ``data`` query parameter of a URL, or None if absent."""
    values = parse_qs(urlsplit(url).query, keep_blank_values=True).get(SHARE_PARAM)
    return values[0] if values else None


def load_invoice_from_url(url: str, *, today: date | None = None) -> LoadResult:
    """Load the invoice carried by a share URL, falling back to the example."""
    return load_shared_invoice(token_from_url(url), today=today)
