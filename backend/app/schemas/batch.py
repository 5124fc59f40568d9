from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.raw_material import Quantity, RawMaterialRef
from app.schemas.supplier import SupplierRef

BATCH_STATUS_PATTERN = "^(Active|Completed|Cancelled)$"
APPROVAL_STATUS_PATTERN = "^(Pending|Approved|Rejected)$"


class BatchBase(BaseModel):
    batch_number: str = Field(..., min_length=1, max_length=100)
    raw_material_id: int
    source_id: int
    production_date: datetime
    acquisition_date: datetime
    buyer: str = Field(..., min_length=1, max_length=200)
    contents: str = Field(..., min_length=1)
    status: str = Field("Active", pattern=BATCH_STATUS_PATTERN)
    quantity: Quantity
    notes: Optional[str] = None


class BatchCreate(BatchBase):
    pass


class BatchUpdate(BaseModel):
    batch_number: Optional[str] = Field(None, min_length=1, max_length=100)
    raw_material_id: Optional[int] = None
    source_id: Optional[int] = None
    production_date: Optional[datetime] = None
    acquisition_date: Optional[datetime] = None
    buyer: Optional[str] = Field(None, min_length=1, max_length=200)
    contents: Optional[str] = Field(None, min_length=1)
    status: Optional[str] = Field(None, pattern=BATCH_STATUS_PATTERN)
    quantity: Optional[Quantity] = None
    notes: Optional[str] = None


class BatchReviewRequest(BaseModel):
    notes: Optional[str] = Field(None, max_length=2000)
    approval_status: Optional[str] = Field(None, pattern=APPROVAL_STATUS_PATTERN)


class BatchResponse(BaseModel):
    id: int
    batch_number: str
    raw_material_id: int
    raw_material: Optional[RawMaterialRef] = None
    source_id: int
    source: Optional[SupplierRef] = None
    production_date: datetime
    acquisition_date: datetime
    buyer: str
    contents: str
    status: str
    approval_status: str
    quantity: Quantity
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
