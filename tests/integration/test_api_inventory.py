"""Integration tests for inventory endpoints."""

from fastapi.testclient import TestClient


def line(equipment_id: str, quantity: int = 1) -> dict:
    return {
        "equipment_id": equipment_id,
        "sku": equipment_id.upper(),
        "name": equipment_id,
        "unit_daily_rate": "10",
        "quantity": quantity,
    }


class TestInventoryEndpoints:

    def test_list(self, api_client: TestClient):
        response = api_client.get("/api/v1/inventory")

        assert response.status_code == 200
        assert {r["catalog_id"] for r in response.json()} == {"eq-gen", "eq-cam"}

    def test_mark_item_owned(self, api_client: TestClient):
        response = api_client.put(
            "/api/v1/inventory/eq-led",
            json={
                "quantity_owned": 4,
                "storage_location": "Rack 3",
                "serial_numbers": ["L-1", " L-2 ", ""],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["quantity_available"] == 4
        assert data["serial_numbers"] == ["L-1", "L-2"]

        equipment = api_client.get("/api/v1/equipment/eq-led").json()
        assert equipment["availability"] == "in-house"

    def test_edit_keeps_available_count_capped(self, api_client: TestClient):
        response = api_client.put("/api/v1/inventory/eq-gen", json={"quantity_owned": 1})

        data = response.json()
        assert data["quantity_owned"] == 1
        assert data["quantity_available"] == 1

    def test_unknown_equipment(self, api_client: TestClient):
        response = api_client.put("/api/v1/inventory/nope", json={"quantity_owned": 1})

        assert response.status_code == 404

    def test_negative_quantity_rejected(self, api_client: TestClient):
        response = api_client.put("/api/v1/inventory/eq-led", json={"quantity_owned": -1})

        assert response.status_code == 400

    def test_delete(self, api_client: TestClient):
        assert api_client.delete("/api/v1/inventory/eq-gen").status_code == 200
        assert api_client.delete("/api/v1/inventory/eq-gen").status_code == 404

    def test_fulfillment_lists(self, api_client: TestClient):
        response = api_client.post(
            "/api/v1/inventory/fulfillment-lists",
            json={"items": [line("eq-gen", 2), line("eq-led"), line("eq-cam")]},
        )

        assert response.status_code == 200
        data = response.json()
        assert [e["equipment_id"] for e in data["owned_pull_list"]] == ["eq-gen", "eq-cam"]
        assert [e["equipment_id"] for e in data["partner_order_list"]] == ["eq-led"]
        assert data["owned_pull_list"][0]["serial_numbers"] == ["G-001", "G-002", "G-003"]
        assert data["summary"] == {
            "owned_item_count": 2,
            "partner_item_count": 1,
            "total_item_count": 3,
        }

    def test_fulfillment_rejects_zero_quantity(self, api_client: TestClient):
        response = api_client.post(
            "/api/v1/inventory/fulfillment-lists",
            json={"items": [line("eq-gen", 0)]},
        )

        assert response.status_code == 400
        assert response.json()["error"]["details"]["kind"] == "INVALID_INPUT"
