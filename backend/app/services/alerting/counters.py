"""
Dashboard summary counters.

``pending_alerts`` counts the underlying conditions straight from the
snapshot; it is not ``len()`` of the derived alert list.
"""
from datetime import datetime

from app.schemas.dashboard import DashboardStats, StatValue
from app.services.alerting.rules import DEFAULT_WINDOW_DAYS, expiring_certifications
from app.services.alerting.snapshot import DashboardSnapshot


def count_quality_issues(snapshot: DashboardSnapshot) -> int:
    # A legacy numeric count is one condition (it yields a single alert).
    return sum(
        len(s.quality_issues) + (1 if s.legacy_issue_count > 0 else 0)
        for s in snapshot.suppliers
    )


def count_expiring_certifications(
    snapshot: DashboardSnapshot,
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> int:
    return sum(
        1
        for supplier in snapshot.suppliers
        for _ in expiring_certifications(supplier, now, window_days)
    )


def count_important_alerts(
    snapshot: DashboardSnapshot,
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> int:
    return (
        count_quality_issues(snapshot)
        + count_expiring_certifications(snapshot, now, window_days)
        + len(snapshot.low_stock_materials)
        + len(snapshot.rejected_batches)
    )


def compute_summary(
    snapshot: DashboardSnapshot,
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> DashboardStats:
    approved = sum(1 for s in snapshot.suppliers if s.status == "Approved")
    return DashboardStats(
        total_raw_materials=StatValue(value=snapshot.total_raw_materials),
        active_suppliers=StatValue(value=approved),
        active_batches=StatValue(value=snapshot.active_batches),
        pending_alerts=StatValue(value=count_important_alerts(snapshot, now, window_days)),
    )
