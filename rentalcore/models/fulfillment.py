"""
Fulfillment Data Models

Owned-stock records and the pull-list / partner-order split.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from rentalcore.models.quotes import LineItem


class InventoryRecord(BaseModel):
    """
    Stock the business owns for one catalog item.

    Having a record at all is what marks an item as owned; everything
    without one is rented from a partner.
    """
    catalog_id: str
    quantity_owned: int = Field(default=0, ge=0)
    quantity_available: int = Field(default=0, ge=0)
    storage_location: Optional[str] = None
    serial_numbers: List[str] = Field(default_factory=list)
    condition: str = "good"
    purchase_price: Optional[Decimal] = Field(default=None, ge=0)


class InventoryUpdate(BaseModel):
    """Edit form from the inventory screen."""
    quantity_owned: int = Field(default=0, ge=0)
    quantity_available: Optional[int] = Field(default=None, ge=0)
    storage_location: Optional[str] = None
    serial_numbers: List[str] = Field(default_factory=list)
    condition: str = "good"
    purchase_price: Optional[Decimal] = Field(default=None, ge=0)


class FulfillmentEntry(BaseModel):
    """One line on a pull list or partner order."""
    equipment_id: str
    sku: str
    name: str
    quantity: int
    storage_location: Optional[str] = None
    serial_numbers: Optional[List[str]] = None


class FulfillmentSummary(BaseModel):
    """Counts shown above the printed lists."""
    owned_item_count: int = 0
    partner_item_count: int = 0
    total_item_count: int = 0


class FulfillmentResult(BaseModel):
    """Every input line item lands in exactly one of the two lists."""
    owned_pull_list: List[FulfillmentEntry] = Field(default_factory=list)
    partner_order_list: List[FulfillmentEntry] = Field(default_factory=list)
    summary: FulfillmentSummary = Field(default_factory=FulfillmentSummary)


class FulfillmentRequest(BaseModel):
    """Items to split, usually read back from an accepted quote."""
    items: List[LineItem] = Field(default_factory=list)
