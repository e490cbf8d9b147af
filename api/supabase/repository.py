"""
Supabase Repository

PostgreSQL database operations via Supabase.
Tables: equipment_catalog, equipment_categories, in_house_inventory, quotes.
"""

import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from api.supabase.client import get_supabase_client
from rentalcore.models.catalog import Equipment, EquipmentCategory, EquipmentFilter, EquipmentPage
from rentalcore.models.common import Pagination, PaginationParams, QuoteStatus
from rentalcore.models.fulfillment import InventoryRecord
from rentalcore.models.quotes import ClientInfo, LineItem, PriceBreakdown, Quote

logger = logging.getLogger(__name__)

EQUIPMENT_SELECT = "*, in_house:in_house_inventory(*)"


def _inventory_from_row(row: Dict[str, Any]) -> InventoryRecord:
    return InventoryRecord(
        catalog_id=row["catalog_id"],
        quantity_owned=row.get("quantity_owned") or 0,
        quantity_available=row.get("quantity_available") or 0,
        storage_location=row.get("storage_location"),
        serial_numbers=row.get("serial_numbers") or [],
        condition=row.get("condition") or "good",
        purchase_price=row.get("purchase_price"),
    )


def _equipment_from_row(row: Dict[str, Any]) -> Equipment:
    # the embedded one-to-many select comes back as a list
    in_house_rows = row.get("in_house") or []
    if isinstance(in_house_rows, dict):
        in_house_rows = [in_house_rows]
    active = [r for r in in_house_rows if r.get("is_active", True)]

    return Equipment(
        id=str(row["id"]),
        sku=row["sku"],
        name=row["name"],
        description=row.get("description"),
        category=row["category"],
        sub_category=row.get("sub_category"),
        partner_price=row.get("partner_price"),
        retail_price=row.get("retail_price"),
        image_url=row.get("image_url"),
        tags=row.get("tags") or [],
        in_house=_inventory_from_row(active[0]) if active else None,
    )


def _quote_from_row(row: Dict[str, Any]) -> Quote:
    return Quote(
        quote_id=row["quote_id"],
        created_at=row["created_at"],
        status=QuoteStatus(row["status"]),
        client=ClientInfo.model_validate(row["client"]),
        start_date=row["start_date"],
        end_date=row["end_date"],
        duration_days=row["duration_days"],
        items=[LineItem.model_validate(item) for item in row.get("items") or []],
        delivery_required=row.get("delivery_required", False),
        pricing=PriceBreakdown.model_validate(row["pricing"]),
        pricing_unavailable=row.get("pricing_unavailable") or [],
        notes=row.get("notes"),
    )


class SupabaseRepository:
    """
    Supabase PostgreSQL repository.

    Only active catalog rows are ever returned.
    """

    def __init__(self, client: Optional[Client] = None):
        """
        Initialize repository.

        Args:
            client: Supabase client; defaults to the shared singleton
        """
        self.client = client or get_supabase_client()

    # =========================================================================
    # Catalog Operations
    # =========================================================================

    def list_equipment(
        self,
        filters: Optional[EquipmentFilter] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> EquipmentPage:
        """Filtered, paginated catalog listing ordered by name."""
        filters = filters or EquipmentFilter()
        pagination = pagination or PaginationParams()

        query = (
            self.client.table("equipment_catalog")
            .select(EQUIPMENT_SELECT, count="exact")
            .eq("is_active", True)
        )
        if filters.category:
            query = query.eq("category", filters.category)
        if filters.search:
            term = filters.search.replace(",", " ")
            query = query.or_(f"name.ilike.%{term}%,sku.ilike.%{term}%")
        query = query.order("name")

        # availability depends on the embedded inventory row, so that
        # filter (and therefore paging) has to happen here
        if filters.availability:
            result = query.execute()
            equipment = [
                eq for eq in (_equipment_from_row(r) for r in result.data or [])
                if eq.availability == filters.availability
            ]
            page = equipment[pagination.offset:pagination.offset + pagination.limit]
            return EquipmentPage(data=page, pagination=Pagination.build(pagination, len(equipment)))

        result = query.range(pagination.offset, pagination.offset + pagination.limit - 1).execute()
        page = [_equipment_from_row(r) for r in result.data or []]
        total = result.count if result.count is not None else len(page)
        return EquipmentPage(data=page, pagination=Pagination.build(pagination, total))

    def get_equipment(self, equipment_id: str) -> Optional[Equipment]:
        """Get a single catalog item with its in-house stock."""
        result = (
            self.client.table("equipment_catalog")
            .select(EQUIPMENT_SELECT)
            .eq("id", equipment_id)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return _equipment_from_row(result.data[0])

    def list_categories(self) -> List[EquipmentCategory]:
        """Active categories in display order."""
        result = (
            self.client.table("equipment_categories")
            .select("*")
            .eq("is_active", True)
            .order("display_order")
            .execute()
        )
        return [
            EquipmentCategory(id=str(row["id"]), name=row["name"], display_order=row.get("display_order") or 0)
            for row in result.data or []
        ]

    # =========================================================================
    # Inventory Operations
    # =========================================================================

    def list_inventory(self) -> List[InventoryRecord]:
        """All active owned-stock records."""
        result = self.client.table("in_house_inventory").select("*").eq("is_active", True).execute()
        return [_inventory_from_row(row) for row in result.data or []]

    def get_inventory(self, catalog_id: str) -> Optional[InventoryRecord]:
        """Owned-stock record for one catalog item, or None if partner-only."""
        result = (
            self.client.table("in_house_inventory")
            .select("*")
            .eq("catalog_id", catalog_id)
            .eq("is_active", True)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return _inventory_from_row(result.data[0])

    def upsert_inventory(self, record: InventoryRecord) -> InventoryRecord:
        """Create or replace the owned-stock record for a catalog item."""
        data = record.model_dump(mode="json")
        data["is_active"] = True
        self.client.table("in_house_inventory").upsert(data, on_conflict="catalog_id").execute()

        logger.info(f"Saved inventory for {record.catalog_id} (owned={record.quantity_owned})")
        return record

    def delete_inventory(self, catalog_id: str) -> bool:
        """Stop owning an item; it falls back to partner fulfillment."""
        result = self.client.table("in_house_inventory").delete().eq("catalog_id", catalog_id).execute()
        deleted = bool(result.data)
        if deleted:
            logger.info(f"Deleted inventory for {catalog_id}")
        return deleted

    # =========================================================================
    # Quote Operations
    # =========================================================================

    def save_quote(self, quote: Quote) -> None:
        """Insert or update a quote."""
        data = quote.model_dump(mode="json")
        self.client.table("quotes").upsert(data, on_conflict="quote_id").execute()

    def get_quote(self, quote_id: str) -> Optional[Quote]:
        """Load a quote by ID."""
        result = self.client.table("quotes").select("*").eq("quote_id", quote_id).limit(1).execute()
        if not result.data:
            return None
        return _quote_from_row(result.data[0])

    def list_quotes(self, status: Optional[QuoteStatus] = None) -> List[Quote]:
        """List quotes, newest first."""
        query = self.client.table("quotes").select("*")
        if status:
            query = query.eq("status", status.value)
        result = query.order("created_at", desc=True).execute()
        return [_quote_from_row(row) for row in result.data or []]
