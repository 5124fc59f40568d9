"""
Canonical, read-only records the alert rules work on.

Supplier documents have gone through two shapes over time:

* certifications: ``["ISO 9001", ...]`` (names only) and later
  ``[{"name": ..., "expiryDate": ...}, ...]``
* quality issues: a bare number of issues and later
  ``[{"description": ..., "date": ...}, ...]``

Both shapes are still stored. They are resolved here, once, so the rules
never branch on the storage shape.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Iterable, Optional, Tuple

from app.utils.clock import parse_timestamp


@dataclass(frozen=True)
class CertificationRecord:
    name: str
    expiry_date: Optional[datetime] = None


@dataclass(frozen=True)
class QualityIssueRecord:
    description: str
    date: Optional[datetime] = None


@dataclass(frozen=True)
class SupplierRecord:
    id: Optional[int]
    name: str
    status: str
    certifications: Tuple[CertificationRecord, ...] = ()
    quality_issues: Tuple[QualityIssueRecord, ...] = ()
    # Non-zero only for rows still holding the numeric issue count.
    legacy_issue_count: int = 0


@dataclass(frozen=True)
class LowStockMaterialRecord:
    id: Optional[int]
    name: str
    quantity_value: Decimal
    quantity_unit: str
    supplier_name: Optional[str] = None


@dataclass(frozen=True)
class RejectedBatchRecord:
    id: Optional[int]
    batch_number: str
    notes: Optional[str] = None
    raw_material_name: Optional[str] = None
    supplier_name: Optional[str] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class DashboardSnapshot:
    suppliers: Tuple[SupplierRecord, ...] = ()
    low_stock_materials: Tuple[LowStockMaterialRecord, ...] = ()
    rejected_batches: Tuple[RejectedBatchRecord, ...] = ()
    total_raw_materials: int = 0
    active_batches: int = 0


def normalize_certifications(raw: Any) -> Tuple[CertificationRecord, ...]:
    if raw is None:
        return ()
    if isinstance(raw, (str, dict)):
        raw = [raw]
    if not isinstance(raw, (list, tuple)):
        return ()

    records = []
    for entry in raw:
        if isinstance(entry, str):
            name = entry.strip()
            if name:
                records.append(CertificationRecord(name=name))
        elif isinstance(entry, dict):
            name = entry.get("name")
            if not isinstance(name, str) or not name.strip():
                continue
            expiry = entry.get("expiryDate", entry.get("expiry_date"))
            records.append(CertificationRecord(name=name.strip(), expiry_date=parse_timestamp(expiry)))
    return tuple(records)


def normalize_quality_issues(raw: Any) -> Tuple[Tuple[QualityIssueRecord, ...], int]:
    """Returns ``(issues, legacy_issue_count)``; at most one of them is non-empty."""
    if raw is None or isinstance(raw, bool):
        return (), 0
    if isinstance(raw, (int, float, Decimal)):
        return (), max(int(raw), 0)
    if not isinstance(raw, (list, tuple)):
        return (), 0

    issues = []
    for entry in raw:
        if isinstance(entry, str) and entry.strip():
            issues.append(QualityIssueRecord(description=entry.strip()))
        elif isinstance(entry, dict):
            description = entry.get("description")
            if not isinstance(description, str) or not description.strip():
                continue
            issues.append(QualityIssueRecord(
                description=description.strip(),
                date=parse_timestamp(entry.get("date")),
            ))
    return tuple(issues), 0


def build_supplier_record(
    supplier_id: Optional[int],
    name: str,
    status: str,
    certifications: Any = None,
    quality_issues: Any = None,
) -> SupplierRecord:
    issues, legacy_count = normalize_quality_issues(quality_issues)
    return SupplierRecord(
        id=supplier_id,
        name=name,
        status=status,
        certifications=normalize_certifications(certifications),
        quality_issues=issues,
        legacy_issue_count=legacy_count,
    )


def build_snapshot(
    suppliers: Iterable[SupplierRecord] = (),
    low_stock_materials: Iterable[LowStockMaterialRecord] = (),
    rejected_batches: Iterable[RejectedBatchRecord] = (),
    total_raw_materials: int = 0,
    active_batches: int = 0,
) -> DashboardSnapshot:
    return DashboardSnapshot(
        suppliers=tuple(suppliers),
        low_stock_materials=tuple(low_stock_materials),
        rejected_batches=tuple(rejected_batches),
        total_raw_materials=total_raw_materials,
        active_batches=active_batches,
    )
