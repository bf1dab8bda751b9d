from datetime import date

import pytest

from invoice_forge.services import DiskInvoiceStore, MemoryInvoiceStore

TODAY = date(2024, 3, 1)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def memory_store() -> MemoryInvoiceStore:
    return MemoryInvoiceStore()


@pytest.fixture
def disk_store(tmp_path):
    store = DiskInvoiceStore(tmp_path / "store")
    yield store
    store.close()


@pytest.fixture
def sample_payload() -> dict:
    return {
        "fromName": "Acme Studio LLC",
        "fromAddress": "1-2-3 Shibuya\nTokyo, Japan",
        "billToName": "Client Co.",
        "billToAddress": "500 Market St\nSan Francisco, CA",
        "invoiceNumber": "INV-1007",
        "issueDate": "2024-03-01",
        "dueDate": "2024-03-15",
        "currency": "USD",
        "taxRatePct": 10,
        "notes": "Thanks!",
        "items": [
            {"id": "a1", "description": "Design", "quantity": 1, "unitPrice": 900},
            {"id": "b2", "description": "Build", "quantity": 10, "unitPrice": 90},
        ],
    }
