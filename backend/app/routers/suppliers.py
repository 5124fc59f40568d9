"""
Suppliers Router — Thin Controller (SRP / DIP)
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_clock, get_current_user, require_admin
from app.models.user import User
from app.schemas.supplier import SupplierCreate, SupplierResponse, SupplierUpdate
from app.schemas.user import MessageResponse
from app.services.supplier_service import SupplierService
from app.utils.clock import Clock

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


def get_supplier_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> SupplierService:
    return SupplierService(db, clock=clock)


@router.get("", response_model=List[SupplierResponse])
def list_suppliers(
    search: Optional[str] = None,
    status: Optional[str] = None,
    quality_issues_count: Optional[int] = Query(None, ge=0),
    service: SupplierService = Depends(get_supplier_service),
    _: User = Depends(get_current_user),
):
    return service.list_suppliers(
        search=search,
        status=status,
        quality_issues_count=quality_issues_count,
    )


@router.get("/{supplier_id}", response_model=SupplierResponse)
def get_supplier(
    supplier_id: int,
    service: SupplierService = Depends(get_supplier_service),
    _: User = Depends(get_current_user),
):
    return service.get_supplier(supplier_id)


@router.post("", response_model=SupplierResponse, status_code=201)
def create_supplier(
    payload: SupplierCreate,
    service: SupplierService = Depends(get_supplier_service),
    _: User = Depends(get_current_user),
):
    return service.create_supplier(payload)


@router.put("/{supplier_id}", response_model=SupplierResponse)
def update_supplier(
    supplier_id: int,
    payload: SupplierUpdate,
    service: SupplierService = Depends(get_supplier_service),
    _: User = Depends(require_admin),
):
    return service.update_supplier(supplier_id, payload)


@router.delete("/{supplier_id}", response_model=MessageResponse)
def delete_supplier(
    supplier_id: int,
    service: SupplierService = Depends(get_supplier_service),
    _: User = Depends(get_current_user),
):
    service.delete_supplier(supplier_id)
    return {"message": "Supplier deleted successfully"}
