"""
Integration Tests — Raw Material Endpoints
"""
from fastapi.testclient import TestClient

BASE_URL = "/api/v1/raw-materials"


def _payload(supplier_id: int, **overrides) -> dict:
    payload = {
        "name": "Acetone",
        "purity": "99.5%",
        "supplier_id": supplier_id,
        "hazard_class": "3",
        "storage_temp": "2-8C",
        "status": "In Stock",
        "quantity": {"value": 250, "unit": "L"},
        "lot_number": "LOT-7",
    }
    payload.update(overrides)
    return payload


class TestRawMaterials:

    def test_create_with_nested_supplier(self, client: TestClient, user_headers, supplier):
        resp = client.post(BASE_URL, headers=user_headers, json=_payload(supplier.id))
        assert resp.status_code == 201
        data = resp.json()
        assert data["supplier"]["name"] == "Acme"
        assert data["quantity"]["unit"] == "L"
        assert float(data["quantity"]["value"]) == 250

    def test_create_with_unknown_supplier(self, client: TestClient, user_headers):
        resp = client.post(BASE_URL, headers=user_headers, json=_payload(404))
        assert resp.status_code == 404

    def test_invalid_unit_rejected(self, client: TestClient, user_headers, supplier):
        resp = client.post(
            BASE_URL,
            headers=user_headers,
            json=_payload(supplier.id, quantity={"value": 1, "unit": "lb"}),
        )
        assert resp.status_code == 422

    def test_list_filters(self, client: TestClient, user_headers, raw_material):
        client.post(BASE_URL, headers=user_headers, json=_payload(raw_material.supplier_id))

        resp = client.get(BASE_URL, headers=user_headers, params={"status": "Low Stock"})
        assert [m["name"] for m in resp.json()] == ["Sodium Hydroxide"]

        resp = client.get(BASE_URL, headers=user_headers, params={"hazard_class": "3"})
        assert [m["name"] for m in resp.json()] == ["Acetone"]

        resp = client.get(BASE_URL, headers=user_headers, params={"search": "sodium"})
        assert len(resp.json()) == 1

    def test_update_requires_admin(self, client: TestClient, user_headers, admin_headers, raw_material):
        url = f"{BASE_URL}/{raw_material.id}"
        assert client.put(url, headers=user_headers, json={"status": "In Stock"}).status_code == 403

        resp = client.put(url, headers=admin_headers, json={"status": "In Stock", "quantity": {"value": 80, "unit": "kg"}})
        assert resp.status_code == 200
        assert resp.json()["status"] == "In Stock"
        assert float(resp.json()["quantity"]["value"]) == 80

    def test_explicit_null_for_required_field_is_ignored(self, client: TestClient, admin_headers, raw_material):
        resp = client.put(
            f"{BASE_URL}/{raw_material.id}",
            headers=admin_headers,
            json={"name": None, "supplier_id": None, "lot_number": None},
        )
        assert resp.status_code == 200
        assert resp.json()["name"] == "Sodium Hydroxide"
        assert resp.json()["supplier_id"] == raw_material.supplier_id
        assert resp.json()["lot_number"] is None

    def test_restocked_material_leaves_alerts(self, client: TestClient, admin_headers, raw_material):
        client.put(f"{BASE_URL}/{raw_material.id}", headers=admin_headers, json={"status": "In Stock"})

        alerts = client.get("/api/v1/dashboard/supplier-alerts", headers=admin_headers).json()
        assert "Low Stock" not in {a["type"] for a in alerts}

    def test_delete_referenced_material_refused(self, client: TestClient, user_headers, batch):
        resp = client.delete(f"{BASE_URL}/{batch.raw_material_id}", headers=user_headers)
        assert resp.status_code == 400
        assert resp.json()["detail"]["details"] == {"batches": 1}

    def test_delete_material(self, client: TestClient, user_headers, raw_material):
        resp = client.delete(f"{BASE_URL}/{raw_material.id}", headers=user_headers)
        assert resp.status_code == 200
        assert client.get(f"{BASE_URL}/{raw_material.id}", headers=user_headers).status_code == 404
