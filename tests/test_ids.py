from invoice_forge.lib.ids import new_item_id


def test_ids_are_strings_and_unique() -> None:
    ids = {new_item_id() for _ in range(1000)}
    assert len(ids) == 1000
    assert all(isinstance(value, str) and value for value in ids)
