"""Tests for the fulfillment splitter."""

from decimal import Decimal

import pytest

from api.storage import MemoryRepository
from rentalcore.errors import InvalidInput
from rentalcore.models.fulfillment import InventoryRecord
from rentalcore.models.quotes import LineItem
from rentalcore.services.fulfillment_service import (
    FulfillmentService,
    lookup_from_records,
    split_fulfillment,
)


def create_item(equipment_id: str, quantity: int = 1) -> LineItem:
    return LineItem(
        equipment_id=equipment_id,
        sku=f"SKU-{equipment_id}",
        name=f"Item {equipment_id}",
        unit_daily_rate=Decimal("10"),
        quantity=quantity,
    )


@pytest.fixture
def owned_records():
    return {
        "A": InventoryRecord(
            catalog_id="A",
            quantity_owned=2,
            quantity_available=2,
            storage_location="Shelf 1",
            serial_numbers=["A-1", "A-2"],
        ),
        "C": InventoryRecord(catalog_id="C", quantity_owned=1, quantity_available=0),
    }


def test_stable_partition(owned_records):
    """A and C owned, B partner-only: order is preserved in both lists."""
    items = [create_item("A"), create_item("B"), create_item("C")]

    result = split_fulfillment(items, owned_records.get)

    assert [e.equipment_id for e in result.owned_pull_list] == ["A", "C"]
    assert [e.equipment_id for e in result.partner_order_list] == ["B"]


def test_summary_counts(owned_records):
    items = [create_item("A"), create_item("B"), create_item("C"), create_item("D")]

    result = split_fulfillment(items, owned_records.get)

    assert result.summary.owned_item_count == 2
    assert result.summary.partner_item_count == 2
    assert result.summary.total_item_count == 4
    assert len(result.owned_pull_list) + len(result.partner_order_list) == len(items)


def test_every_item_in_exactly_one_list(owned_records):
    items = [create_item(x) for x in ["C", "X", "A", "Y", "Z"]]

    result = split_fulfillment(items, owned_records.get)

    owned_ids = {e.equipment_id for e in result.owned_pull_list}
    partner_ids = {e.equipment_id for e in result.partner_order_list}
    assert owned_ids.isdisjoint(partner_ids)
    assert owned_ids | partner_ids == {i.equipment_id for i in items}


def test_owned_entry_carries_location_and_all_serials(owned_records):
    result = split_fulfillment([create_item("A", quantity=1)], owned_records.get)
    entry = result.owned_pull_list[0]

    assert entry.storage_location == "Shelf 1"
    assert entry.serial_numbers == ["A-1", "A-2"]
    assert entry.quantity == 1


def test_partner_entry_has_no_location_or_serials(owned_records):
    result = split_fulfillment([create_item("B", quantity=3)], owned_records.get)
    entry = result.partner_order_list[0]

    assert entry.storage_location is None
    assert entry.serial_numbers is None
    assert entry.quantity == 3


def test_owned_even_when_nothing_available(owned_records):
    """Presence of a record decides ownership; stock levels are not checked."""
    result = split_fulfillment([create_item("C", quantity=5)], owned_records.get)

    assert len(result.owned_pull_list) == 1
    assert result.owned_pull_list[0].quantity == 5


def test_repeated_ids_are_looked_up_each_time(owned_records):
    calls = []

    def lookup(catalog_id):
        calls.append(catalog_id)
        return owned_records.get(catalog_id)

    split_fulfillment([create_item("A"), create_item("A"), create_item("B")], lookup)

    assert calls == ["A", "A", "B"]


def test_empty_items():
    result = split_fulfillment([], lambda _id: None)

    assert result.owned_pull_list == []
    assert result.partner_order_list == []
    assert result.summary.total_item_count == 0


def test_non_positive_quantity_raises_before_lookup():
    calls = []

    def lookup(catalog_id):
        calls.append(catalog_id)
        return None

    with pytest.raises(InvalidInput):
        split_fulfillment([create_item("A"), create_item("B", quantity=0)], lookup)
    assert calls == []


def test_lookup_from_records(owned_records):
    lookup = lookup_from_records(owned_records.values())

    assert lookup("A").storage_location == "Shelf 1"
    assert lookup("missing") is None


class TestFulfillmentService:
    """Store-backed splitting."""

    @pytest.fixture
    def store(self, owned_records):
        repo = MemoryRepository()
        for record in owned_records.values():
            repo.upsert_inventory(record)
        return repo

    def test_split_matches_batched(self, store):
        service = FulfillmentService(store)
        items = [create_item("B"), create_item("A"), create_item("C")]

        assert service.split(items) == service.split_batched(items)

    def test_split_reads_store(self, store):
        result = FulfillmentService(store).split([create_item("A"), create_item("B")])

        assert [e.equipment_id for e in result.owned_pull_list] == ["A"]
        assert [e.equipment_id for e in result.partner_order_list] == ["B"]
