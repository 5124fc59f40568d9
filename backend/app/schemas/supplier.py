from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from app.utils.clock import parse_timestamp

SUPPLIER_STATUS_PATTERN = "^(Approved|Pending|Suspended)$"


class Certification(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    expiry_date: Optional[datetime] = Field(None, alias="expiryDate")

    class Config:
        populate_by_name = True


class QualityIssue(BaseModel):
    description: str = Field(..., min_length=1, max_length=1000)
    date: Optional[datetime] = None


class Address(BaseModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None


class SupplierBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    status: str = Field("Pending", pattern=SUPPLIER_STATUS_PATTERN)
    certifications: List[Certification] = Field(default_factory=list)
    quality_issues: List[QualityIssue] = Field(default_factory=list)
    last_audit: Optional[datetime] = None
    contact_email: Optional[str] = Field(None, max_length=255)
    contact_phone: Optional[str] = Field(None, max_length=50)
    address: Optional[Address] = None
    notes: Optional[str] = None


class SupplierCreate(SupplierBase):
    pass


class SupplierUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    status: Optional[str] = Field(None, pattern=SUPPLIER_STATUS_PATTERN)
    certifications: Optional[List[Certification]] = None
    quality_issues: Optional[List[QualityIssue]] = None
    last_audit: Optional[datetime] = None
    contact_email: Optional[str] = Field(None, max_length=255)
    contact_phone: Optional[str] = Field(None, max_length=50)
    address: Optional[Address] = None
    notes: Optional[str] = None


class SupplierResponse(BaseModel):
    """Stored documents are returned as-is, legacy shapes included."""

    id: int
    name: str
    status: str
    certifications: List[Union[Certification, str]] = Field(default_factory=list)
    quality_issues: Union[List[QualityIssue], int] = Field(default_factory=list)
    last_audit: Optional[datetime] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    address: Optional[Address] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        populate_by_name = True

    @field_validator("certifications", mode="before")
    @classmethod
    def _readable_certifications(cls, value):
        if not isinstance(value, list):
            return []
        cleaned = []
        for entry in value:
            if isinstance(entry, str) and entry.strip():
                cleaned.append(entry)
            elif isinstance(entry, dict) and isinstance(entry.get("name"), str) and entry["name"].strip():
                expiry = entry.get("expiryDate", entry.get("expiry_date"))
                cleaned.append({"name": entry["name"], "expiryDate": parse_timestamp(expiry)})
        return cleaned

    @field_validator("quality_issues", mode="before")
    @classmethod
    def _readable_quality_issues(cls, value):
        if isinstance(value, bool) or value is None:
            return []
        if isinstance(value, (int, float)):
            return max(int(value), 0)
        if not isinstance(value, list):
            return []
        cleaned = []
        for entry in value:
            if isinstance(entry, str) and entry.strip():
                cleaned.append({"description": entry})
            elif isinstance(entry, dict) and isinstance(entry.get("description"), str) and entry["description"].strip():
                cleaned.append({"description": entry["description"], "date": parse_timestamp(entry.get("date"))})
        return cleaned


class SupplierRef(BaseModel):
    id: int
    name: str
    status: str

    class Config:
        from_attributes = True
