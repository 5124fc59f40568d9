"""
Integration Tests — Dashboard Endpoints

Tests:
- GET /api/v1/dashboard/stats
- GET /api/v1/dashboard/supplier-alerts
- GET /api/v1/dashboard/recent-batches
- Admin gate and storage failure handling
"""
from datetime import datetime, timedelta

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.config import settings
from app.models.supplier import Supplier
from app.repositories.dashboard_repository import DashboardRepository

# Matches the clock the client fixture injects.
TODAY = datetime(2026, 10, 19)
ALERTS_URL = "/api/v1/dashboard/supplier-alerts"
STATS_URL = "/api/v1/dashboard/stats"


def _reject(client: TestClient, headers, batch_id: int, notes: str = "contamination"):
    resp = client.patch(
        f"/api/v1/batches/{batch_id}/review",
        headers=headers,
        json={"approval_status": "Rejected", "notes": notes},
    )
    assert resp.status_code == 200
    return resp


class TestDashboardAccess:

    def test_alerts_require_token(self, client: TestClient):
        resp = client.get(ALERTS_URL)
        assert resp.status_code == 401

    def test_alerts_forbidden_for_non_admin(self, client: TestClient, user_headers):
        resp = client.get(ALERTS_URL, headers=user_headers)
        assert resp.status_code == 403

    def test_stats_forbidden_for_qa_worker(self, client: TestClient, qa_headers):
        resp = client.get(STATS_URL, headers=qa_headers)
        assert resp.status_code == 403


class TestSupplierAlerts:

    def test_empty_database_has_no_alerts(self, client: TestClient, admin_headers):
        resp = client.get(ALERTS_URL, headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json() == []

    def test_alerts_cover_every_rule(self, client: TestClient, admin_headers, batch):
        _reject(client, admin_headers, batch.id)

        resp = client.get(ALERTS_URL, headers=admin_headers)
        assert resp.status_code == 200
        alerts = resp.json()

        assert {a["type"] for a in alerts} == {
            "Quality Issue",
            "Certification Expiring",
            "Low Stock",
            "Batch Rejected",
        }
        assert all(set(a) == {"type", "message", "supplier", "severity", "date"} for a in alerts)

        cert = next(a for a in alerts if a["type"] == "Certification Expiring")
        assert cert["severity"] == "high"
        assert "5 day(s)" in cert["message"]

        low = next(a for a in alerts if a["type"] == "Low Stock")
        assert "12 kg" in low["message"]
        assert low["supplier"] == "Acme"

        rejected = next(a for a in alerts if a["type"] == "Batch Rejected")
        assert "B-100" in rejected["message"]
        assert "contamination" in rejected["message"]
        assert rejected["supplier"] == "Acme"

    def test_high_alerts_precede_medium(self, client: TestClient, admin_headers, db, supplier):
        db.add(Supplier(
            name="Borealis",
            status="Approved",
            certifications=[{"name": "GMP", "expiryDate": (TODAY + timedelta(days=20)).isoformat()}],
            quality_issues=[],
        ))
        db.add(Supplier(
            name="Cobalt",
            status="Approved",
            certifications=[{"name": "REACH", "expiryDate": (TODAY + timedelta(days=2)).isoformat()}],
            quality_issues=[],
        ))
        db.commit()

        alerts = client.get(ALERTS_URL, headers=admin_headers).json()

        severities = [a["severity"] for a in alerts]
        assert severities == sorted(severities, key=lambda s: 0 if s == "high" else 1)
        assert alerts[-1]["supplier"] == "Borealis"
        assert alerts[-1]["severity"] == "medium"

    def test_legacy_supplier_shapes(self, client: TestClient, admin_headers, db):
        db.add(Supplier(name="Legacy Co", status="Pending", certifications=["ISO 9001"], quality_issues=3))
        db.commit()

        alerts = client.get(ALERTS_URL, headers=admin_headers).json()

        assert len(alerts) == 1
        assert alerts[0]["type"] == "Quality Issues"
        assert "3 quality issue(s)" in alerts[0]["message"]

    def test_limit_setting_caps_alerts(self, client: TestClient, admin_headers, supplier, raw_material, monkeypatch):
        monkeypatch.setattr(settings, "DASHBOARD_ALERT_LIMIT", 2)

        alerts = client.get(ALERTS_URL, headers=admin_headers).json()

        assert len(alerts) == 2

    def test_storage_failure_returns_500_with_message(self, client: TestClient, admin_headers, monkeypatch):
        def broken_collect(self):
            raise OperationalError("SELECT * FROM suppliers", {}, Exception("database is locked"))

        monkeypatch.setattr(DashboardRepository, "collect", broken_collect)

        resp = client.get(ALERTS_URL, headers=admin_headers)
        assert resp.status_code == 500
        assert "database is locked" in resp.json()["message"]


class TestDashboardStats:

    def test_stats_shape_and_values(self, client: TestClient, admin_headers, batch):
        resp = client.get(STATS_URL, headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json() == {
            "totalRawMaterials": {"value": 1},
            "activeSuppliers": {"value": 1},
            "activeBatches": {"value": 1},
            # quality issue + expiring certification + low stock material
            "pendingAlerts": {"value": 3},
        }

    def test_pending_alerts_matches_alert_list(self, client: TestClient, admin_headers, batch):
        _reject(client, admin_headers, batch.id)

        stats = client.get(STATS_URL, headers=admin_headers).json()
        alerts = client.get(ALERTS_URL, headers=admin_headers).json()

        assert stats["pendingAlerts"]["value"] == len(alerts) == 4


class TestRecentBatches:

    def test_recent_active_batches(self, client: TestClient, admin_headers, batch):
        resp = client.get("/api/v1/dashboard/recent-batches", headers=admin_headers)
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 1
        assert data[0]["batch_number"] == "B-100"
        assert data[0]["raw_material_name"] == "Sodium Hydroxide"
        assert data[0]["source_name"] == "Acme"

    def test_completed_batches_are_excluded(self, client: TestClient, admin_headers, batch, db):
        batch.status = "Completed"
        db.commit()

        resp = client.get("/api/v1/dashboard/recent-batches", headers=admin_headers)
        assert resp.json() == []
