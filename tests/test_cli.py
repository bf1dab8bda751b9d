import io
import json

import pytest

from invoice_forge.cli import main
from invoice_forge.codec import STATUS_SHARE_FAILED, token_from_url


@pytest.fixture
def invoice_file(tmp_path, sample_payload):
    path = tmp_path / "invoice.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def store_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("INVOICE_FORGE_STORE_DIR", str(tmp_path / "store"))
    monkeypatch.setenv("INVOICE_FORGE_STORE", "disk")


def test_example(capsys) -> None:
    assert main(["example"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["invoiceNumber"] == "INV-1007"
    assert len(payload["items"]) == 2


def test_totals(capsys, invoice_file) -> None:
    assert main(["totals", str(invoice_file)]) == 0
    out = capsys.readouterr().out
    assert "Design\tUSD 900.00" in out
    assert "Subtotal\tUSD 1,800.00" in out
    assert "Tax (10%)\tUSD 180.00" in out
    assert "Total\tUSD 1,980.00" in out


def test_totals_from_stdin(capsys, monkeypatch) -> None:
    payload = '{"items": [{"quantity": 3, "unitPrice": 0.1}]}'
    monkeypatch.setattr("sys.stdin", io.StringIO(payload))
    assert main(["totals"]) == 0
    assert "Total\tUSD 0.30" in capsys.readouterr().out


def test_totals_bad_input_falls_back(capsys, tmp_path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("nope", encoding="utf-8")
    assert main(["totals", str(path)]) == 1
    captured = capsys.readouterr()
    assert "Total\tUSD 1,980.00" in captured.out
    assert "Could not import invoice" in captured.err


def test_share_and_open(capsys, invoice_file, sample_payload) -> None:
    args = ["share", str(invoice_file), "--base-url", "https://inv.example/"]
    assert main(args) == 0
    url = capsys.readouterr().out.strip()
    assert url.startswith("https://inv.example/?data=")

    assert main(["open", url]) == 0
    assert json.loads(capsys.readouterr().out) == sample_payload

    assert main(["open", token_from_url(url)]) == 0
    assert json.loads(capsys.readouterr().out) == sample_payload


def test_share_token_only(capsys, invoice_file) -> None:
    assert main(["share", str(invoice_file), "--token-only"]) == 0
    token = capsys.readouterr().out.strip()
    assert "?" not in token and "=" not in token


def test_open_garbage(capsys) -> None:
    assert main(["open", "not-base64!!"]) == 1
    captured = capsys.readouterr()
    assert json.loads(captured.out)["invoiceNumber"] == "INV-1007"
    assert STATUS_SHARE_FAILED in captured.err


def test_save_load_export_import(
    capsys, invoice_file, tmp_path, sample_payload
) -> None:
    assert main(["load"]) == 1
    assert "No saved invoice found." in capsys.readouterr().err

    assert main(["save", str(invoice_file)]) == 0
    assert main(["load"]) == 0
    assert json.loads(capsys.readouterr().out) == sample_payload

    exported = tmp_path / "out.json"
    assert main(["export", str(exported)]) == 0
    assert json.loads(exported.read_text(encoding="utf-8")) == sample_payload

    other = tmp_path / "other.json"
    other.write_text('{"fromName": "Other"}', encoding="utf-8")
    assert main(["import", str(other)]) == 0
    capsys.readouterr()
    assert main(["load"]) == 0
    assert json.loads(capsys.readouterr().out)["fromName"] == "Other"


def test_memory_store_option(capsys) -> None:
    assert main(["--store", "memory", "load"]) == 1
    assert "No saved invoice found." in capsys.readouterr().err


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        main([])
