"""
Inventory API Routes

Mark which equipment the business owns, and split orders into pull-from-stock
vs partner-order lists.
"""

from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_fulfillment_service, get_repository
from api.middleware.errors import NotFoundError
from rentalcore.models.fulfillment import (
    FulfillmentRequest,
    FulfillmentResult,
    InventoryRecord,
    InventoryUpdate,
)
from rentalcore.services import FulfillmentService

router = APIRouter()


@router.get("", response_model=List[InventoryRecord])
def list_inventory(repo=Depends(get_repository)):
    """All owned-stock records."""
    return repo.list_inventory()


@router.put("/{catalog_id}", response_model=InventoryRecord)
def save_inventory(
    catalog_id: str,
    update: InventoryUpdate,
    repo=Depends(get_repository),
):
    """
    Create or edit the owned-stock record for a catalog item.

    A new record starts fully available unless quantity_available is given;
    an existing record keeps its available count, capped at the new owned
    quantity.
    """
    if not repo.get_equipment(catalog_id):
        raise NotFoundError("Equipment", catalog_id)

    existing = repo.get_inventory(catalog_id)
    if update.quantity_available is not None:
        available = update.quantity_available
    elif existing is not None:
        available = existing.quantity_available
    else:
        available = update.quantity_owned

    record = InventoryRecord(
        catalog_id=catalog_id,
        quantity_owned=update.quantity_owned,
        quantity_available=min(available, update.quantity_owned),
        storage_location=update.storage_location or None,
        serial_numbers=[s.strip() for s in update.serial_numbers if s.strip()],
        condition=update.condition,
        purchase_price=update.purchase_price,
    )
    return repo.upsert_inventory(record)


@router.delete("/{catalog_id}")
def delete_inventory(catalog_id: str, repo=Depends(get_repository)):
    """Stop owning an item; it will be ordered from a partner."""
    if not repo.delete_inventory(catalog_id):
        raise NotFoundError("Inventory", catalog_id)
    return {"status": "deleted", "catalog_id": catalog_id}


@router.post("/fulfillment-lists", response_model=FulfillmentResult)
def fulfillment_lists(
    request: FulfillmentRequest,
    fulfillment_svc: FulfillmentService = Depends(get_fulfillment_service),
):
    """Split items into the owned pull list and the partner order list."""
    return fulfillment_svc.split(request.items)
