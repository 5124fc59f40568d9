# Dashboard alerting: snapshot records -> rules -> ranking, plus summary counters
from app.services.alerting.snapshot import (
    CertificationRecord,
    QualityIssueRecord,
    SupplierRecord,
    LowStockMaterialRecord,
    RejectedBatchRecord,
    DashboardSnapshot,
    build_snapshot,
    build_supplier_record,
)
from app.services.alerting.rules import derive_alerts
from app.services.alerting.ranking import rank_alerts
from app.services.alerting.counters import compute_summary, count_important_alerts

__all__ = [
    "CertificationRecord",
    "QualityIssueRecord",
    "SupplierRecord",
    "LowStockMaterialRecord",
    "RejectedBatchRecord",
    "DashboardSnapshot",
    "build_snapshot",
    "build_supplier_record",
    "derive_alerts",
    "rank_alerts",
    "compute_summary",
    "count_important_alerts",
]
