"""
Dashboard Router — admin-only counters, alerts and recent batches
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_clock, require_admin
from app.models.user import User
from app.schemas.dashboard import Alert, DashboardStats, RecentBatchView
from app.services.dashboard_service import DashboardService
from app.utils.clock import Clock

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


def get_dashboard_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> DashboardService:
    return DashboardService(db, clock=clock)


@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(
    service: DashboardService = Depends(get_dashboard_service),
    _: User = Depends(require_admin),
):
    return service.get_stats()


@router.get("/supplier-alerts", response_model=List[Alert])
def supplier_alerts(
    service: DashboardService = Depends(get_dashboard_service),
    _: User = Depends(require_admin),
):
    return service.get_alerts()


@router.get("/recent-batches", response_model=List[RecentBatchView])
def recent_batches(
    service: DashboardService = Depends(get_dashboard_service),
    _: User = Depends(require_admin),
):
    return service.get_recent_batches()
