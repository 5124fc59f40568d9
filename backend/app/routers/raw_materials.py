"""
Raw Materials Router — Thin Controller (SRP / DIP)
"""
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user, require_admin
from app.models.user import User
from app.schemas.raw_material import RawMaterialCreate, RawMaterialResponse, RawMaterialUpdate
from app.schemas.user import MessageResponse
from app.services.raw_material_service import RawMaterialService

router = APIRouter(prefix="/raw-materials", tags=["Raw Materials"])


def get_raw_material_service(db: Session = Depends(get_db)) -> RawMaterialService:
    return RawMaterialService(db)


@router.get("", response_model=List[RawMaterialResponse])
def list_raw_materials(
    search: Optional[str] = None,
    status: Optional[str] = None,
    supplier_id: Optional[int] = None,
    hazard_class: Optional[str] = None,
    service: RawMaterialService = Depends(get_raw_material_service),
    _: User = Depends(get_current_user),
):
    return service.list_materials(
        search=search,
        status=status,
        supplier_id=supplier_id,
        hazard_class=hazard_class,
    )


@router.get("/{material_id}", response_model=RawMaterialResponse)
def get_raw_material(
    material_id: int,
    service: RawMaterialService = Depends(get_raw_material_service),
    _: User = Depends(get_current_user),
):
    return service.get_material(material_id)


@router.post("", response_model=RawMaterialResponse, status_code=201)
def create_raw_material(
    payload: RawMaterialCreate,
    service: RawMaterialService = Depends(get_raw_material_service),
    _: User = Depends(get_current_user),
):
    return service.create_material(payload)


@router.put("/{material_id}", response_model=RawMaterialResponse)
def update_raw_material(
    material_id: int,
    payload: RawMaterialUpdate,
    service: RawMaterialService = Depends(get_raw_material_service),
    _: User = Depends(require_admin),
):
    return service.update_material(material_id, payload)


@router.delete("/{material_id}", response_model=MessageResponse)
def delete_raw_material(
    material_id: int,
    service: RawMaterialService = Depends(get_raw_material_service),
    _: User = Depends(get_current_user),
):
    service.delete_material(material_id)
    return {"message": "Raw material deleted successfully"}
