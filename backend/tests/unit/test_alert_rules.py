from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from app.services.alerting import (
    LowStockMaterialRecord,
    RejectedBatchRecord,
    build_snapshot,
    build_supplier_record,
    derive_alerts,
    rank_alerts,
)
from app.services.alerting.rules import (
    certification_alerts,
    format_quantity,
    low_stock_alerts,
    quality_issue_alerts,
    rejected_batch_alerts,
)

NOW = datetime(2026, 10, 19, 9, 30, 0)
TODAY = datetime(2026, 10, 19)


def _supplier(name="Acme", certifications=None, quality_issues=None, status="Approved"):
    return build_supplier_record(
        supplier_id=1,
        name=name,
        status=status,
        certifications=certifications,
        quality_issues=quality_issues,
    )


def _cert_expiring_in(days: int, name: str = "ISO 9001") -> dict:
    return {"name": name, "expiryDate": (TODAY + timedelta(days=days)).isoformat()}


class TestQualityIssueRule:

    def test_empty_issue_list_yields_no_alert(self):
        assert quality_issue_alerts(_supplier(quality_issues=[]), NOW) == []

    def test_one_alert_per_issue(self):
        issued = TODAY - timedelta(days=2)
        supplier = _supplier(quality_issues=[
            {"description": "late shipment", "date": issued.isoformat()},
            {"description": "damaged drums", "date": issued.isoformat()},
        ])

        alerts = quality_issue_alerts(supplier, NOW)

        assert [a.type for a in alerts] == ["Quality Issue", "Quality Issue"]
        assert all(a.severity == "high" for a in alerts)
        assert all(a.supplier == "Acme" for a in alerts)
        assert alerts[0].date == issued
        assert "late shipment" in alerts[0].message
        assert "2026-10-17" in alerts[0].message
        assert "damaged drums" in alerts[1].message

    def test_legacy_count_yields_single_plural_alert(self):
        alerts = quality_issue_alerts(_supplier(quality_issues=3), NOW)

        assert len(alerts) == 1
        assert alerts[0].type == "Quality Issues"
        assert "3 quality issue(s)" in alerts[0].message
        assert alerts[0].severity == "high"
        assert alerts[0].date == NOW

    def test_legacy_zero_count_yields_nothing(self):
        assert quality_issue_alerts(_supplier(quality_issues=0), NOW) == []

    def test_issue_without_date_still_alerts(self):
        alerts = quality_issue_alerts(_supplier(quality_issues=[{"description": "odor"}]), NOW)

        assert len(alerts) == 1
        assert alerts[0].date is None
        assert "odor" in alerts[0].message


class TestCertificationRule:

    def test_expiry_on_last_day_of_window_alerts(self):
        alerts = certification_alerts(_supplier(certifications=[_cert_expiring_in(30)]), NOW)

        assert len(alerts) == 1
        assert "30 day(s)" in alerts[0].message

    def test_timed_expiry_on_last_day_of_window_alerts(self):
        expiry = TODAY + timedelta(days=30, hours=12)
        supplier = _supplier(certifications=[{"name": "GMP", "expiryDate": expiry.isoformat()}])

        alerts = certification_alerts(supplier, NOW)

        assert len(alerts) == 1
        assert alerts[0].severity == "medium"
        assert alerts[0].date == expiry

    def test_expiry_one_day_past_window_is_ignored(self):
        assert certification_alerts(_supplier(certifications=[_cert_expiring_in(31)]), NOW) == []

    def test_already_expired_is_ignored(self):
        assert certification_alerts(_supplier(certifications=[_cert_expiring_in(-1)]), NOW) == []

    def test_expiry_today_is_high(self):
        alerts = certification_alerts(_supplier(certifications=[_cert_expiring_in(0)]), NOW)

        assert len(alerts) == 1
        assert alerts[0].severity == "high"
        assert "0 day(s)" in alerts[0].message

    @pytest.mark.parametrize(
        "days, severity",
        [(1, "high"), (7, "high"), (8, "medium"), (15, "medium"), (30, "medium")],
    )
    def test_severity_bands(self, days, severity):
        alerts = certification_alerts(_supplier(certifications=[_cert_expiring_in(days)]), NOW)

        assert len(alerts) == 1
        assert alerts[0].severity == severity
        assert alerts[0].type == "Certification Expiring"
        assert alerts[0].date == TODAY + timedelta(days=days)

    def test_partial_days_round_up(self):
        expiry = TODAY + timedelta(days=5, hours=12)
        supplier = _supplier(certifications=[{"name": "GMP", "expiryDate": expiry.isoformat()}])

        alerts = certification_alerts(supplier, NOW)

        assert "6 day(s)" in alerts[0].message

    def test_certifications_without_usable_expiry_are_skipped(self):
        supplier = _supplier(certifications=[
            "ISO 14001",
            {"name": "REACH"},
            {"name": "GMP", "expiryDate": None},
            {"name": "Halal", "expiryDate": "next spring"},
            42,
        ])

        assert certification_alerts(supplier, NOW) == []

    def test_custom_window_and_critical_threshold(self):
        supplier = _supplier(certifications=[_cert_expiring_in(40), _cert_expiring_in(10)])

        alerts = certification_alerts(supplier, NOW, window_days=60, critical_days=14)

        assert [a.severity for a in alerts] == ["medium", "high"]


class TestLowStockRule:

    def test_message_embeds_quantity_and_unit(self):
        material = LowStockMaterialRecord(
            id=1,
            name="Sodium Hydroxide",
            quantity_value=Decimal("12.000"),
            quantity_unit="kg",
            supplier_name="Acme",
        )

        alerts = low_stock_alerts([material], NOW)

        assert len(alerts) == 1
        assert alerts[0].type == "Low Stock"
        assert "Sodium Hydroxide" in alerts[0].message
        assert "12 kg" in alerts[0].message
        assert alerts[0].supplier == "Acme"
        assert alerts[0].severity == "high"
        assert alerts[0].date == NOW

    def test_missing_supplier_is_unknown(self):
        material = LowStockMaterialRecord(id=1, name="Ethanol", quantity_value=Decimal("2.5"), quantity_unit="L")

        alerts = low_stock_alerts([material], NOW)

        assert alerts[0].supplier == "Unknown"
        assert "2.5 L" in alerts[0].message

    @pytest.mark.parametrize(
        "value, expected",
        [(Decimal("12.000"), "12"), (Decimal("0.250"), "0.25"), (7, "7"), (1.5, "1.5")],
    )
    def test_format_quantity(self, value, expected):
        assert format_quantity(value) == expected


class TestRejectedBatchRule:

    def test_message_contains_number_and_notes(self):
        modified = TODAY - timedelta(days=1)
        batch = RejectedBatchRecord(
            id=1,
            batch_number="B-100",
            notes="contamination",
            supplier_name="Acme",
            updated_at=modified,
        )

        alerts = rejected_batch_alerts([batch])

        assert len(alerts) == 1
        assert alerts[0].type == "Batch Rejected"
        assert "B-100" in alerts[0].message
        assert "contamination" in alerts[0].message
        assert alerts[0].supplier == "Acme"
        assert alerts[0].severity == "high"
        assert alerts[0].date == modified

    def test_without_notes_or_supplier(self):
        alerts = rejected_batch_alerts([RejectedBatchRecord(id=2, batch_number="B-200")])

        assert alerts[0].message == "Batch B-200 was rejected"
        assert alerts[0].supplier == "Unknown"


class TestDeriveAlerts:

    def test_acme_scenario_ranks_ahead_of_medium_alerts(self):
        acme = _supplier(
            certifications=[_cert_expiring_in(5)],
            quality_issues=[{"description": "late shipment", "date": (TODAY - timedelta(days=2)).isoformat()}],
        )
        other = _supplier(name="Borealis", certifications=[_cert_expiring_in(20, name="GMP")])
        snapshot = build_snapshot(suppliers=[other, acme])

        ranked = rank_alerts(derive_alerts(snapshot, NOW))

        acme_alerts = [a for a in ranked if a.supplier == "Acme"]
        assert len(acme_alerts) == 2
        assert {a.type for a in acme_alerts} == {"Certification Expiring", "Quality Issue"}
        assert all(a.severity == "high" for a in acme_alerts)
        cert = next(a for a in acme_alerts if a.type == "Certification Expiring")
        assert "5 day(s)" in cert.message
        issue = next(a for a in acme_alerts if a.type == "Quality Issue")
        assert "late shipment" in issue.message
        assert ranked[-1].supplier == "Borealis"
        assert ranked[-1].severity == "medium"

    def test_discovery_order(self):
        snapshot = build_snapshot(
            suppliers=[_supplier(certifications=[_cert_expiring_in(3)], quality_issues=2)],
            low_stock_materials=[
                LowStockMaterialRecord(id=1, name="Acetone", quantity_value=Decimal("4"), quantity_unit="L"),
            ],
            rejected_batches=[RejectedBatchRecord(id=1, batch_number="B-1")],
        )

        alerts = derive_alerts(snapshot, NOW)

        assert [a.type for a in alerts] == [
            "Quality Issues",
            "Certification Expiring",
            "Low Stock",
            "Batch Rejected",
        ]

    def test_repeated_runs_are_identical(self):
        snapshot = build_snapshot(
            suppliers=[
                _supplier(certifications=[_cert_expiring_in(12), _cert_expiring_in(2)], quality_issues=1),
                _supplier(name="Borealis", quality_issues=[{"description": "mislabeled", "date": "2026-10-01"}]),
            ],
            rejected_batches=[RejectedBatchRecord(id=1, batch_number="B-9", notes="pH out of range")],
        )

        first = rank_alerts(derive_alerts(snapshot, NOW))
        second = rank_alerts(derive_alerts(snapshot, NOW))

        assert [a.model_dump() for a in first] == [a.model_dump() for a in second]
