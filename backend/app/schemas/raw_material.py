from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.supplier import SupplierRef

MATERIAL_STATUS_PATTERN = "^(In Stock|Low Stock|Out of Stock)$"
UNIT_PATTERN = "^(kg|L|g|mL)$"


class Quantity(BaseModel):
    value: Decimal = Field(..., ge=0)
    unit: str = Field(..., pattern=UNIT_PATTERN)


class RawMaterialBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    purity: str = Field(..., min_length=1, max_length=100)
    supplier_id: int
    hazard_class: str = Field(..., min_length=1, max_length=100)
    storage_temp: str = Field(..., min_length=1, max_length=100)
    status: str = Field("In Stock", pattern=MATERIAL_STATUS_PATTERN)
    quantity: Quantity
    expiry_date: Optional[datetime] = None
    lot_number: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None


class RawMaterialCreate(RawMaterialBase):
    pass


class RawMaterialUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    purity: Optional[str] = Field(None, min_length=1, max_length=100)
    supplier_id: Optional[int] = None
    hazard_class: Optional[str] = Field(None, min_length=1, max_length=100)
    storage_temp: Optional[str] = Field(None, min_length=1, max_length=100)
    status: Optional[str] = Field(None, pattern=MATERIAL_STATUS_PATTERN)
    quantity: Optional[Quantity] = None
    expiry_date: Optional[datetime] = None
    lot_number: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None


class RawMaterialResponse(BaseModel):
    id: int
    name: str
    purity: str
    supplier_id: int
    supplier: Optional[SupplierRef] = None
    hazard_class: str
    storage_temp: str
    status: str
    quantity: Quantity
    expiry_date: Optional[datetime] = None
    lot_number: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RawMaterialRef(BaseModel):
    id: int
    name: str
    purity: str

    class Config:
        from_attributes = True
