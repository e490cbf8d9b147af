"""
Fulfillment Service

Splits an order's line items into what we pull from our own stock and what
we order from a rental partner.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from rentalcore.errors import InvalidInput
from rentalcore.models.fulfillment import (
    FulfillmentEntry,
    FulfillmentResult,
    FulfillmentSummary,
    InventoryRecord,
)
from rentalcore.models.quotes import LineItem

logger = logging.getLogger(__name__)

InventoryLookup = Callable[[str], Optional[InventoryRecord]]


def split_fulfillment(
    items: Sequence[LineItem],
    inventory_lookup: InventoryLookup,
) -> FulfillmentResult:
    """
    Partition items into the owned pull list and the partner order list.

    Each item is looked up once, in input order, and both output lists keep
    that order. Owned entries carry the record's storage location and every
    known serial number; serials are not allocated to individual units.
    Requested quantity is not checked against quantity_available.
    """
    for item in items:
        if item.quantity < 1:
            raise InvalidInput(
                f"Quantity for {item.sku} must be a positive integer",
                details={"equipment_id": item.equipment_id, "quantity": item.quantity},
            )

    owned: List[FulfillmentEntry] = []
    partner: List[FulfillmentEntry] = []

    for item in items:
        record = inventory_lookup(item.equipment_id)
        if record is not None:
            owned.append(FulfillmentEntry(
                equipment_id=item.equipment_id,
                sku=item.sku,
                name=item.name,
                quantity=item.quantity,
                storage_location=record.storage_location,
                serial_numbers=list(record.serial_numbers),
            ))
        else:
            partner.append(FulfillmentEntry(
                equipment_id=item.equipment_id,
                sku=item.sku,
                name=item.name,
                quantity=item.quantity,
            ))

    return FulfillmentResult(
        owned_pull_list=owned,
        partner_order_list=partner,
        summary=FulfillmentSummary(
            owned_item_count=len(owned),
            partner_item_count=len(partner),
            total_item_count=len(items),
        ),
    )


def lookup_from_records(records: Iterable[InventoryRecord]) -> InventoryLookup:
    """Build a lookup over records fetched up front in one batch."""
    by_id: Dict[str, InventoryRecord] = {r.catalog_id: r for r in records}
    return by_id.get


class FulfillmentService:
    """Fulfillment splitter backed by an inventory store."""

    def __init__(self, store):
        self.store = store

    def split(self, items: Sequence[LineItem]) -> FulfillmentResult:
        """Split items, reading ownership from the store one item at a time."""
        result = split_fulfillment(items, self.store.get_inventory)
        logger.info(
            f"Fulfillment split: {result.summary.owned_item_count} owned, "
            f"{result.summary.partner_item_count} partner"
        )
        return result

    def split_batched(self, items: Sequence[LineItem]) -> FulfillmentResult:
        """Split items against a single up-front fetch of all owned stock."""
        return split_fulfillment(items, lookup_from_records(self.store.list_inventory()))
