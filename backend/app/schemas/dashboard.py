from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


AlertType = Literal[
    "Quality Issue",
    "Quality Issues",
    "Certification Expiring",
    "Low Stock",
    "Batch Rejected",
]
AlertSeverity = Literal["high", "medium"]


class Alert(BaseModel):
    type: AlertType
    message: str
    supplier: str
    severity: AlertSeverity
    date: Optional[datetime] = None


class StatValue(BaseModel):
    value: int


class DashboardStats(BaseModel):
    total_raw_materials: StatValue = Field(alias="totalRawMaterials")
    active_suppliers: StatValue = Field(alias="activeSuppliers")
    active_batches: StatValue = Field(alias="activeBatches")
    pending_alerts: StatValue = Field(alias="pendingAlerts")

    class Config:
        populate_by_name = True


class RecentBatchView(BaseModel):
    id: int
    batch_number: str
    raw_material_name: Optional[str] = None
    source_name: Optional[str] = None
    buyer: str
    status: str
    approval_status: str
    production_date: datetime
    created_at: datetime
