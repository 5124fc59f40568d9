"""
Alert derivation rules.

Every function here is pure: the output depends only on the snapshot records
and the ``now`` instant handed in by the caller. Rules run in discovery
order (per supplier: quality issues, then certifications; then low stock;
then rejected batches) and that order is the ranking tie-break.
"""
from datetime import datetime, timedelta
from decimal import Decimal
from math import ceil
from typing import Iterable, Iterator, List, Tuple

from app.schemas.dashboard import Alert
from app.services.alerting.snapshot import (
    CertificationRecord,
    DashboardSnapshot,
    LowStockMaterialRecord,
    RejectedBatchRecord,
    SupplierRecord,
)
from app.utils.clock import start_of_day

UNKNOWN_SUPPLIER = "Unknown"
DEFAULT_WINDOW_DAYS = 30
DEFAULT_CRITICAL_DAYS = 7

_SECONDS_PER_DAY = 86400


def format_quantity(value) -> str:
    amount = Decimal(str(value))
    if amount == amount.to_integral_value():
        return str(int(amount))
    return format(amount.normalize(), "f")


def days_until(expiry: datetime, today: datetime) -> int:
    return ceil((expiry - today).total_seconds() / _SECONDS_PER_DAY)


def expiring_certifications(
    supplier: SupplierRecord,
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> Iterator[Tuple[CertificationRecord, int]]:
    """Yields ``(certification, days_until_expiry)`` for expiries in ``[today, today + window]``.

    The upper bound covers the whole last day, so a timed expiry on it still counts.
    """
    today = start_of_day(now)
    window_end = today + timedelta(days=window_days)
    for cert in supplier.certifications:
        if cert.expiry_date is None:
            continue
        if today <= cert.expiry_date and start_of_day(cert.expiry_date) <= window_end:
            yield cert, days_until(cert.expiry_date, today)


def quality_issue_alerts(supplier: SupplierRecord, now: datetime) -> List[Alert]:
    alerts = [
        Alert(
            type="Quality Issue",
            message=(
                f"{supplier.name} - Quality issue: {issue.description} "
                f"(reported {issue.date:%Y-%m-%d})"
                if issue.date else
                f"{supplier.name} - Quality issue: {issue.description}"
            ),
            supplier=supplier.name,
            severity="high",
            date=issue.date,
        )
        for issue in supplier.quality_issues
    ]
    if supplier.legacy_issue_count > 0:
        alerts.append(Alert(
            type="Quality Issues",
            message=f"{supplier.name} - {supplier.legacy_issue_count} quality issue(s)",
            supplier=supplier.name,
            severity="high",
            date=now,
        ))
    return alerts


def certification_alerts(
    supplier: SupplierRecord,
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
    critical_days: int = DEFAULT_CRITICAL_DAYS,
) -> List[Alert]:
    return [
        Alert(
            type="Certification Expiring",
            message=f"{supplier.name} - {cert.name} expires in {days} day(s)",
            supplier=supplier.name,
            severity="high" if days <= critical_days else "medium",
            date=cert.expiry_date,
        )
        for cert, days in expiring_certifications(supplier, now, window_days)
    ]


def low_stock_alerts(materials: Iterable[LowStockMaterialRecord], now: datetime) -> List[Alert]:
    return [
        Alert(
            type="Low Stock",
            message=(
                f"{material.name} is low on stock: "
                f"{format_quantity(material.quantity_value)} {material.quantity_unit} remaining"
            ),
            supplier=material.supplier_name or UNKNOWN_SUPPLIER,
            severity="high",
            date=now,
        )
        for material in materials
    ]


def rejected_batch_alerts(batches: Iterable[RejectedBatchRecord]) -> List[Alert]:
    alerts = []
    for batch in batches:
        message = f"Batch {batch.batch_number} was rejected"
        if batch.notes:
            message = f"{message}: {batch.notes}"
        alerts.append(Alert(
            type="Batch Rejected",
            message=message,
            supplier=batch.supplier_name or UNKNOWN_SUPPLIER,
            severity="high",
            date=batch.updated_at,
        ))
    return alerts


def derive_alerts(
    snapshot: DashboardSnapshot,
    now: datetime,
    window_days: int = DEFAULT_WINDOW_DAYS,
    critical_days: int = DEFAULT_CRITICAL_DAYS,
) -> List[Alert]:
    alerts: List[Alert] = []
    for supplier in snapshot.suppliers:
        alerts.extend(quality_issue_alerts(supplier, now))
        alerts.extend(certification_alerts(supplier, now, window_days, critical_days))
    alerts.extend(low_stock_alerts(snapshot.low_stock_materials, now))
    alerts.extend(rejected_batch_alerts(snapshot.rejected_batches))
    return alerts
