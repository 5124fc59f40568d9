"""
Dashboard Service — summary counters, alerts and recent batches
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from app.config import settings
from app.repositories.batch_repository import BatchRepository
from app.repositories.dashboard_repository import DashboardRepository
from app.schemas.dashboard import Alert, DashboardStats, RecentBatchView
from app.services.alerting import compute_summary, derive_alerts, rank_alerts
from app.utils.clock import Clock, utc_now

logger = logging.getLogger(__name__)


class DashboardService:

    def __init__(self, db: Session, clock: Clock = utc_now):
        self._repo = DashboardRepository(db)
        self._batch_repo = BatchRepository(db)
        self._clock = clock

    def get_stats(self) -> DashboardStats:
        snapshot = self._repo.collect()
        stats = compute_summary(
            snapshot,
            now=self._clock(),
            window_days=settings.CERTIFICATION_EXPIRY_WINDOW_DAYS,
        )
        logger.debug(
            "dashboard_stats_computed raw_materials=%s approved_suppliers=%s active_batches=%s pending_alerts=%s",
            stats.total_raw_materials.value,
            stats.active_suppliers.value,
            stats.active_batches.value,
            stats.pending_alerts.value,
        )
        return stats

    def get_alerts(self) -> List[Alert]:
        snapshot = self._repo.collect()
        alerts = derive_alerts(
            snapshot,
            now=self._clock(),
            window_days=settings.CERTIFICATION_EXPIRY_WINDOW_DAYS,
            critical_days=settings.CERTIFICATION_CRITICAL_DAYS,
        )
        ranked = rank_alerts(
            alerts,
            order=settings.DASHBOARD_ALERT_ORDER,
            limit=settings.DASHBOARD_ALERT_LIMIT,
        )
        logger.info(
            "dashboard_alerts_computed suppliers=%s low_stock=%s rejected_batches=%s alerts=%s returned=%s",
            len(snapshot.suppliers),
            len(snapshot.low_stock_materials),
            len(snapshot.rejected_batches),
            len(alerts),
            len(ranked),
        )
        return ranked

    def get_recent_batches(self) -> List[RecentBatchView]:
        return [
            RecentBatchView(
                id=b.id,
                batch_number=b.batch_number,
                raw_material_name=b.raw_material.name if b.raw_material else None,
                source_name=b.source.name if b.source else None,
                buyer=b.buyer,
                status=b.status,
                approval_status=b.approval_status,
                production_date=b.production_date,
                created_at=b.created_at,
            )
            for b in self._batch_repo.get_recent_active(limit=settings.RECENT_BATCHES_LIMIT)
        ]
