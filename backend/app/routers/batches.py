"""
Batches Router — Thin Controller (SRP / DIP)
"""
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user, require_admin, require_roles
from app.models.user import User
from app.schemas.batch import BatchCreate, BatchResponse, BatchReviewRequest, BatchUpdate
from app.schemas.user import MessageResponse
from app.services.batch_service import BatchService

router = APIRouter(prefix="/batches", tags=["Batches"])

REVIEW_ROLES = ["admin", "qa-worker"]


def get_batch_service(db: Session = Depends(get_db)) -> BatchService:
    return BatchService(db)


@router.get("", response_model=List[BatchResponse])
def list_batches(
    search: Optional[str] = None,
    status: Optional[str] = None,
    source_id: Optional[int] = None,
    buyer: Optional[str] = None,
    service: BatchService = Depends(get_batch_service),
    _: User = Depends(get_current_user),
):
    return service.list_batches(search=search, status=status, source_id=source_id, buyer=buyer)


@router.get("/{batch_id}", response_model=BatchResponse)
def get_batch(
    batch_id: int,
    service: BatchService = Depends(get_batch_service),
    _: User = Depends(get_current_user),
):
    return service.get_batch(batch_id)


@router.post("", response_model=BatchResponse, status_code=201)
def create_batch(
    payload: BatchCreate,
    service: BatchService = Depends(get_batch_service),
    _: User = Depends(get_current_user),
):
    return service.create_batch(payload)


@router.put("/{batch_id}", response_model=BatchResponse)
def update_batch(
    batch_id: int,
    payload: BatchUpdate,
    service: BatchService = Depends(get_batch_service),
    _: User = Depends(require_admin),
):
    return service.update_batch(batch_id, payload)


@router.patch("/{batch_id}/review", response_model=BatchResponse)
def review_batch(
    batch_id: int,
    payload: BatchReviewRequest,
    service: BatchService = Depends(get_batch_service),
    current_user: User = Depends(require_roles(REVIEW_ROLES)),
):
    return service.review_batch(batch_id, payload, reviewer_id=current_user.id)


@router.delete("/{batch_id}", response_model=MessageResponse)
def delete_batch(
    batch_id: int,
    service: BatchService = Depends(get_batch_service),
    _: User = Depends(get_current_user),
):
    service.delete_batch(batch_id)
    return {"message": "Batch deleted successfully"}
