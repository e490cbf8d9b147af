"""
Catalog Data Models

Equipment records as served by the catalog store, with in-house
availability folded in.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from rentalcore.models.common import Availability, Pagination
from rentalcore.models.fulfillment import InventoryRecord


class EquipmentCategory(BaseModel):
    """A catalog category."""
    id: str
    name: str
    display_order: int = 0


class Equipment(BaseModel):
    """A rentable catalog item."""
    id: str
    sku: str
    name: str
    description: Optional[str] = None
    category: str
    sub_category: Optional[str] = None
    partner_price: Optional[Decimal] = None
    retail_price: Optional[Decimal] = None
    image_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    in_house: Optional[InventoryRecord] = None

    @computed_field
    @property
    def availability(self) -> Availability:
        """In-house only when we own it and some of it is free."""
        if self.in_house is not None and self.in_house.quantity_available > 0:
            return Availability.IN_HOUSE
        return Availability.PARTNER


class EquipmentFilter(BaseModel):
    """Catalog query filters."""
    category: Optional[str] = None
    search: Optional[str] = None
    availability: Optional[Availability] = None

    def matches(self, equipment: Equipment) -> bool:
        if self.category and equipment.category != self.category:
            return False
        if self.search:
            needle = self.search.lower()
            if needle not in equipment.name.lower() and needle not in equipment.sku.lower():
                return False
        if self.availability and equipment.availability != self.availability:
            return False
        return True


class EquipmentPage(BaseModel):
    """One page of catalog results."""
    data: List[Equipment]
    pagination: Pagination
