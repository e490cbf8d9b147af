"""
In-Memory Repository

Dict-backed stand-in for the Supabase tables. Used when Supabase is not
configured and in tests.
"""

import logging
from typing import Dict, List, Optional

from rentalcore.models.catalog import Equipment, EquipmentCategory, EquipmentFilter, EquipmentPage
from rentalcore.models.common import Pagination, PaginationParams, QuoteStatus
from rentalcore.models.fulfillment import InventoryRecord
from rentalcore.models.quotes import Quote

logger = logging.getLogger(__name__)


class MemoryRepository:
    """Catalog, inventory and quote store held in process memory."""

    def __init__(self):
        self._equipment: Dict[str, Equipment] = {}
        self._categories: Dict[str, EquipmentCategory] = {}
        self._inventory: Dict[str, InventoryRecord] = {}
        self._quotes: Dict[str, Quote] = {}

    # =========================================================================
    # Catalog
    # =========================================================================

    def add_equipment(self, equipment: Equipment) -> None:
        self._equipment[equipment.id] = equipment.model_copy(update={"in_house": None})
        if equipment.in_house is not None:
            self._inventory[equipment.id] = equipment.in_house

    def add_category(self, category: EquipmentCategory) -> None:
        self._categories[category.id] = category

    def _with_inventory(self, equipment: Equipment) -> Equipment:
        return equipment.model_copy(update={"in_house": self._inventory.get(equipment.id)})

    def list_equipment(
        self,
        filters: Optional[EquipmentFilter] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> EquipmentPage:
        """Filtered, paginated catalog listing ordered by name."""
        filters = filters or EquipmentFilter()
        pagination = pagination or PaginationParams()

        matches = [
            eq for eq in (self._with_inventory(e) for e in self._equipment.values())
            if filters.matches(eq)
        ]
        matches.sort(key=lambda e: e.name.lower())

        page = matches[pagination.offset:pagination.offset + pagination.limit]
        return EquipmentPage(data=page, pagination=Pagination.build(pagination, len(matches)))

    def get_equipment(self, equipment_id: str) -> Optional[Equipment]:
        equipment = self._equipment.get(equipment_id)
        return self._with_inventory(equipment) if equipment else None

    def list_categories(self) -> List[EquipmentCategory]:
        return sorted(self._categories.values(), key=lambda c: (c.display_order, c.name))

    # =========================================================================
    # Inventory
    # =========================================================================

    def list_inventory(self) -> List[InventoryRecord]:
        return list(self._inventory.values())

    def get_inventory(self, catalog_id: str) -> Optional[InventoryRecord]:
        return self._inventory.get(catalog_id)

    def upsert_inventory(self, record: InventoryRecord) -> InventoryRecord:
        self._inventory[record.catalog_id] = record
        logger.info(f"Saved inventory for {record.catalog_id} (owned={record.quantity_owned})")
        return record

    def delete_inventory(self, catalog_id: str) -> bool:
        if catalog_id in self._inventory:
            del self._inventory[catalog_id]
            return True
        return False

    # =========================================================================
    # Quotes
    # =========================================================================

    def save_quote(self, quote: Quote) -> None:
        self._quotes[quote.quote_id] = quote

    def get_quote(self, quote_id: str) -> Optional[Quote]:
        return self._quotes.get(quote_id)

    def list_quotes(self, status: Optional[QuoteStatus] = None) -> List[Quote]:
        quotes = list(self._quotes.values())
        if status:
            quotes = [q for q in quotes if q.status == status]
        return sorted(quotes, key=lambda q: q.created_at, reverse=True)
