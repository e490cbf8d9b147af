"""
Equipment Catalog API Routes

Read-only catalog browsing with in-house availability.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_repository
from api.middleware.errors import NotFoundError
from rentalcore.models.catalog import Equipment, EquipmentCategory, EquipmentFilter, EquipmentPage
from rentalcore.models.common import Availability, PaginationParams

router = APIRouter()


@router.get("", response_model=EquipmentPage)
def list_equipment(
    category: Optional[str] = Query(None, description="Exact category name"),
    search: Optional[str] = Query(None, description="Matches name or SKU"),
    availability: Optional[Availability] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(25, ge=1, le=100),
    repo=Depends(get_repository),
):
    """List active equipment, filtered and paginated."""
    return repo.list_equipment(
        EquipmentFilter(category=category, search=search or None, availability=availability),
        PaginationParams(page=page, limit=limit),
    )


@router.get("/categories", response_model=List[EquipmentCategory])
def list_categories(repo=Depends(get_repository)):
    """Active categories in display order."""
    return repo.list_categories()


@router.get("/{equipment_id}", response_model=Equipment)
def get_equipment(equipment_id: str, repo=Depends(get_repository)):
    """Get a single equipment item."""
    equipment = repo.get_equipment(equipment_id)
    if not equipment:
        raise NotFoundError("Equipment", equipment_id)
    return equipment
