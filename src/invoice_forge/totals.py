"""
Totals calculation for invoices.

All three printed figures go through round2, which works on the decimal
string form of each value so binary float artifacts (3 * 0.1) never show
up. Tax and total derive from the already rounded subtotal, never from
separately rounded line totals. Arithmetic runs in a wide decimal context
so any value accepted as a JSON number can be quantized to cents.
"""

from decimal import ROUND_HALF_UP, Context, Decimal, localcontext
from typing import Any

from invoice_forge.models.invoice import Invoice, LineItem, Totals
from invoice_forge.utils import is_number

_CENTS = Decimal("0.01")
_HUNDRED = Decimal("100")
# Room for the product of two floats near float max, plus the cents
_CONTEXT = Context(prec=1000)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if not is_number(value):
        return Decimal("0")
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(str(value))


def _quantize(value: Decimal) -> Decimal:
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def round2(value: Any) -> float:
    """
    Round to the nearest 0.01 with ties away from zero.

    Args:
        value: A number; anything non-numeric counts as 0.

    Returns:
        The rounded value as a float.
    """
    with localcontext(_CONTEXT):
        return float(_quantize(_to_decimal(value)))


def line_total(item: LineItem) -> float:
    """Return quantity x unit price for one row, rounded for display."""
    with localcontext(_CONTEXT):
        return round2(_to_decimal(item.quantity) * _to_decimal(item.unit_price))


def calculate_totals(invoice: Invoice) -> Totals:
    """
    Derive subtotal, tax and total for an invoice.

    Args:
        invoice: A normalized invoice. Non-numeric quantities or prices
            are treated as 0.

    Returns:
        Totals with each figure rounded to 2 decimal places.
    """
    with localcontext(_CONTEXT):
        raw_subtotal = sum(
            (
                _to_decimal(item.quantity) * _to_decimal(item.unit_price)
                for item in invoice.items
            ),
            Decimal("0"),
        )
        subtotal = _quantize(raw_subtotal)
        tax = _quantize(subtotal * _to_decimal(invoice.tax_rate_pct) / _HUNDRED)
        total = _quantize(subtotal + tax)
    return Totals(
        subtotal=float(subtotal),
        tax=float(tax),
        total=float(total),
        currency=invoice.currency,
    )
