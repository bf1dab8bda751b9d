import pytest

from invoice_forge.editing import (
    add_item,
    find_item,
    remove_item,
    update_field,
    update_item,
)
from invoice_forge.models import normalize_invoice


@pytest.fixture
def invoice(sample_payload, today):
    return normalize_invoice(sample_payload, today=today)


def test_update_field_returns_new_invoice(invoice) -> None:
    updated = update_field(invoice, "bill_to_name", "New Client")

    assert updated.bill_to_name == "New Client"
    assert invoice.bill_to_name == "Client Co."
    assert updated.items == invoice.items


@pytest.mark.parametrize("name", ["items", "billToName", "unknown"])
def test_update_field_rejects_unknown_names(invoice, name) -> None:
    with pytest.raises(ValueError):
        update_field(invoice, name, "x")


def test_add_item_appends_blank_row(invoice) -> None:
    updated = add_item(invoice)

    assert len(updated.items) == 3
    assert len(invoice.items) == 2
    new = updated.items[-1]
    assert (new.description, new.quantity, new.unit_price) == ("", 1, 0)
    assert new.id not in {item.id for item in invoice.items}


def test_update_item_keeps_id_and_order(invoice) -> None:
    updated = update_item(invoice, "b2", quantity=12, description="Build v2")

    assert [item.id for item in updated.items] == ["a1", "b2"]
    assert find_item(updated, "b2").quantity == 12
    assert find_item(updated, "b2").description == "Build v2"
    assert find_item(invoice, "b2").quantity == 10


def test_update_item_unknown_id_is_noop(invoice) -> None:
    assert update_item(invoice, "zz", quantity=5).items == invoice.items


@pytest.mark.parametrize("change", [{"id": "new"}, {"unitPrice": 3}, {"sku": "x"}])
def test_update_item_rejects_bad_keys(invoice, change) -> None:
    with pytest.raises(ValueError):
        update_item(invoice, "a1", **change)


def test_remove_item(invoice) -> None:
    updated = remove_item(invoice, "a1")
    assert [item.id for item in updated.items] == ["b2"]
    assert len(invoice.items) == 2


def test_last_item_is_never_removed(invoice) -> None:
    single = remove_item(invoice, "a1")
    assert [item.id for item in remove_item(single, "b2").items] == ["b2"]


def test_find_item_missing(invoice) -> None:
    assert find_item(invoice, "nope") is None


def test_remove_item_with_shared_id_keeps_items(today) -> None:
    invoice = normalize_invoice({"items": [{"id": "a"}, {"id": "a"}]}, today=today)
    assert [item.id for item in remove_item(invoice, "a").items] == ["a", "a"]

    invoice = normalize_invoice(
        {"items": [{"id": "a"}, {"id": "b"}, {"id": "a"}]}, today=today
    )
    assert [item.id for item in remove_item(invoice, "a").items] == ["b"]
