import json

import pytest

from invoice_forge.errors import MalformedInput, ParseFailure
from invoice_forge.exchange import (
    STATUS_IMPORT_FAILED,
    STATUS_IMPORTED,
    export_invoice_file,
    export_invoice_json,
    import_invoice_file,
    import_invoice_json,
    parse_invoice_text,
)
from invoice_forge.models import LoadOutcome, normalize_invoice


def test_export_is_pretty_canonical_json(sample_payload, today) -> None:
    text = export_invoice_json(normalize_invoice(sample_payload, today=today))
    assert text.startswith('{\n  "fromName": "Acme Studio LLC"')
    assert json.loads(text) == sample_payload


def test_import_round_trip(sample_payload, today) -> None:
    invoice = normalize_invoice(sample_payload, today=today)
    result = import_invoice_json(export_invoice_json(invoice), today=today)

    assert result.outcome is LoadOutcome.LOADED
    assert result.status == STATUS_IMPORTED
    assert result.invoice == invoice


@pytest.mark.parametrize("text", ["nope", "", "[]", "null", None])
def test_import_failures_fall_back(text, today) -> None:
    result = import_invoice_json(text, today=today)

    assert result.outcome is LoadOutcome.FAILED
    assert result.status == STATUS_IMPORT_FAILED
    assert result.invoice.invoice_number == "INV-1007"


def test_import_with_oversized_number_loads_defaults(today) -> None:
    result = import_invoice_json('{"taxRatePct": 1' + "0" * 400 + "}", today=today)

    assert result.outcome is LoadOutcome.LOADED
    assert result.invoice.tax_rate_pct == 0


def test_parse_invoice_text_errors() -> None:
    with pytest.raises(ParseFailure):
        parse_invoice_text("{")
    with pytest.raises(ParseFailure):
        parse_invoice_text(42)
    with pytest.raises(MalformedInput):
        parse_invoice_text('"just a string"')


def test_file_round_trip(tmp_path, sample_payload, today) -> None:
    sample_payload["notes"] = "Grüße"
    invoice = normalize_invoice(sample_payload, today=today)
    path = export_invoice_file(invoice, tmp_path / "invoice.json")

    assert path.read_text(encoding="utf-8").endswith("}\n")
    result = import_invoice_file(path, today=today)
    assert result.ok
    assert result.invoice == invoice


def test_import_missing_file(tmp_path, today) -> None:
    result = import_invoice_file(tmp_path / "absent.json", today=today)
    assert result.outcome is LoadOutcome.MISSING
    assert "absent.json" in result.status


def test_import_invalid_file(tmp_path, today) -> None:
    path = tmp_path / "broken.json"
    path.write_bytes(b"\xff\xfe not json")
    result = import_invoice_file(path, today=today)
    assert result.outcome is LoadOutcome.FAILED


def test_import_directory_is_failure(tmp_path, today) -> None:
    result = import_invoice_file(tmp_path, today=today)
    assert result.outcome is LoadOutcome.FAILED
