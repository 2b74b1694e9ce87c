"""API-level tests: health, dashboard and error handling."""

from unittest.mock import patch

from relieftrack.services.errors import StoreError


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_dashboard_empty(client):
    """Test dashboard with no data."""
    response = client.get("/api/v1/dashboard")
    assert response.status_code == 200
    assert response.json() == {
        "total_households": 0,
        "total_inventory_items": 0,
        "total_distributions": 0,
        "total_activities": 0,
        "low_stock_items": [],
    }


def test_dashboard_summary(client, rice_pack, household):
    """Test dashboard counts and the low-stock list, scarcest first."""
    client.post("/api/v1/inventory", json={"item_name": "Blanket", "quantity": 2})
    client.post(
        "/api/v1/inventory",
        json={"item_name": "Paracetamol", "quantity": 7, "low_stock_threshold": 20},
    )
    client.post(
        "/api/v1/distributions",
        json={
            "household_id": household["id"],
            "inventory_id": rice_pack["id"],
            "quantity_distributed": 6,
            "distributed_by": "Officer A",
        },
    )

    data = client.get("/api/v1/dashboard").json()
    assert data["total_households"] == 1
    assert data["total_inventory_items"] == 3
    assert data["total_distributions"] == 1
    assert data["total_activities"] == 5
    assert [i["item_name"] for i in data["low_stock_items"]] == [
        "Blanket",
        "Rice Pack",
        "Paracetamol",
    ]


def test_performed_by_header(client):
    """Test the actor header is recorded, and blank falls back to the default."""
    client.post(
        "/api/v1/inventory", json={"item_name": "Tent"}, headers={"X-Performed-By": "Officer D"}
    )
    client.post("/api/v1/inventory", json={"item_name": "Mat"}, headers={"X-Performed-By": " "})

    logs = client.get("/api/v1/activity").json()
    assert [log["performed_by"] for log in logs] == ["Admin User", "Officer D"]


def test_store_error_is_reported(client):
    """Test that database failures surface their message with a 500."""
    with patch(
        "relieftrack.services.inventory_service.InventoryService.create_item",
        side_effect=StoreError("connection reset"),
    ):
        response = client.post("/api/v1/inventory", json={"item_name": "Tent"})

    assert response.status_code == 500
    assert response.json() == {"detail": "connection reset"}
