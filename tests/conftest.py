"""Pytest configuration and fixtures."""

import os
from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["DEBUG"] = "true"
os.environ["SUPABASE_URL"] = ""
os.environ["SUPABASE_ANON_KEY"] = ""
os.environ["INSURANCE_RATE"] = "0.05"
os.environ["TAX_RATE"] = "0.08875"

from api.storage import MemoryRepository  # noqa: E402
from rentalcore.models import (  # noqa: E402
    Equipment,
    EquipmentCategory,
    InventoryRecord,
)


@pytest.fixture
def sample_equipment() -> list:
    """Catalog items: one owned and free, one partner-only, one owned but all out."""
    return [
        Equipment(
            id="eq-gen",
            sku="GEN-5000",
            name="Generator 5kW",
            category="Power",
            retail_price=Decimal("100"),
            partner_price=Decimal("80"),
            in_house=InventoryRecord(
                catalog_id="eq-gen",
                quantity_owned=3,
                quantity_available=2,
                storage_location="Bay A",
                serial_numbers=["G-001", "G-002", "G-003"],
            ),
        ),
        Equipment(
            id="eq-led",
            sku="LED-1X1",
            name="LED Panel 1x1",
            category="Lighting",
            retail_price=Decimal("45.50"),
        ),
        Equipment(
            id="eq-cam",
            sku="CAM-ALX",
            name="Cinema Camera",
            category="Camera",
            retail_price=None,
            in_house=InventoryRecord(
                catalog_id="eq-cam",
                quantity_owned=1,
                quantity_available=0,
                storage_location="Cage 2",
            ),
        ),
    ]


@pytest.fixture
def repository(sample_equipment) -> MemoryRepository:
    """In-memory store seeded with the sample catalog."""
    repo = MemoryRepository()
    for equipment in sample_equipment:
        repo.add_equipment(equipment)
    repo.add_category(EquipmentCategory(id="cat-3", name="Camera", display_order=3))
    repo.add_category(EquipmentCategory(id="cat-1", name="Power", display_order=1))
    repo.add_category(EquipmentCategory(id="cat-2", name="Lighting", display_order=2))
    return repo


@pytest.fixture
def api_client(repository) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client backed by the seeded repository."""
    from api.dependencies import get_repository
    from api.main import app

    app.dependency_overrides[get_repository] = lambda: repository
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()

