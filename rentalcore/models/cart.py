"""
Cart & Browse State

Explicit state objects owned by the presentation layer. The pricing and
fulfillment services only ever see what is passed in from here.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from rentalcore.models.catalog import Equipment, EquipmentFilter
from rentalcore.models.common import PaginationParams
from rentalcore.models.quotes import LineItem


class CartLine(BaseModel):
    """One piece of equipment in the cart."""
    equipment: Equipment
    quantity: int = Field(default=1, ge=1)


class Cart(BaseModel):
    """Quote-in-progress. Lines keep the order they were added in."""
    lines: List[CartLine] = Field(default_factory=list)

    def _find(self, equipment_id: str) -> Optional[CartLine]:
        for line in self.lines:
            if line.equipment.id == equipment_id:
                return line
        return None

    def add_item(self, equipment: Equipment, quantity: int = 1) -> None:
        """Add equipment, merging into an existing line for the same id."""
        if quantity < 1:
            return
        line = self._find(equipment.id)
        if line:
            line.quantity += quantity
        else:
            self.lines.append(CartLine(equipment=equipment, quantity=quantity))

    def update_quantity(self, equipment_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes it."""
        if quantity <= 0:
            self.remove_item(equipment_id)
            return
        line = self._find(equipment_id)
        if line:
            line.quantity = quantity

    def remove_item(self, equipment_id: str) -> None:
        self.lines = [line for line in self.lines if line.equipment.id != equipment_id]

    def clear(self) -> None:
        self.lines = []

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def daily_total(self) -> Decimal:
        """Per-day equipment cost; taxes, insurance and delivery come later."""
        return sum(
            ((line.equipment.retail_price or Decimal("0")) * line.quantity for line in self.lines),
            Decimal("0"),
        )

    def to_line_items(self) -> List[LineItem]:
        """Snapshot the cart as immutable line items for pricing."""
        return [
            LineItem(
                equipment_id=line.equipment.id,
                sku=line.equipment.sku,
                name=line.equipment.name,
                category=line.equipment.category,
                unit_daily_rate=line.equipment.retail_price,
                quantity=line.quantity,
            )
            for line in self.lines
        ]


class CatalogBrowseState(BaseModel):
    """Category / search / page selection on the catalog screen."""
    category: Optional[str] = None
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=25, ge=1, le=100)

    def select_category(self, category: Optional[str]) -> None:
        self.category = category or None
        self.page = 1

    def set_search(self, search: Optional[str]) -> None:
        self.search = (search or "").strip() or None
        self.page = 1

    def to_query(self) -> tuple:
        """(EquipmentFilter, PaginationParams) for the catalog store."""
        return (
            EquipmentFilter(category=self.category, search=self.search),
            PaginationParams(page=self.page, limit=self.limit),
        )
