"""
Batch Service — Service Layer (SRP / DIP)
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import (
    DuplicateEntityException,
    EntityNotFoundException,
    to_http_exception,
)
from app.models.batch import Batch
from app.repositories.batch_repository import BatchRepository
from app.repositories.raw_material_repository import RawMaterialRepository
from app.repositories.supplier_repository import SupplierRepository
from app.schemas.batch import BatchCreate, BatchReviewRequest, BatchUpdate

logger = logging.getLogger(__name__)

# Columns an update may clear with an explicit null; nulls for any other field are ignored.
NULLABLE_FIELDS = {"notes"}


class BatchService:

    def __init__(self, db: Session):
        self._repo = BatchRepository(db)
        self._material_repo = RawMaterialRepository(db)
        self._supplier_repo = SupplierRepository(db)

    def list_batches(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        source_id: Optional[int] = None,
        buyer: Optional[str] = None,
    ) -> List[Batch]:
        return self._repo.list_filtered(search=search, status=status, source_id=source_id, buyer=buyer)

    def get_batch(self, batch_id: int) -> Batch:
        batch = self._repo.get_by_id(batch_id)
        if not batch:
            raise to_http_exception(EntityNotFoundException("Batch", batch_id))
        return batch

    def create_batch(self, data: BatchCreate) -> Batch:
        self._ensure_unique_number(data.batch_number)
        self._ensure_references(data.raw_material_id, data.source_id)
        values = data.model_dump(exclude={"quantity"})
        batch = Batch(
            **values,
            quantity_value=data.quantity.value,
            quantity_unit=data.quantity.unit,
        )
        result = self._repo.create(batch)
        logger.info("batch_created batch_id=%s batch_number=%s", result.id, result.batch_number)
        return result

    def update_batch(self, batch_id: int, data: BatchUpdate) -> Batch:
        batch = self.get_batch(batch_id)
        updates = {
            k: v
            for k, v in data.model_dump(exclude_unset=True, exclude={"quantity"}).items()
            if v is not None or k in NULLABLE_FIELDS
        }
        if "batch_number" in updates and updates["batch_number"] != batch.batch_number:
            self._ensure_unique_number(updates["batch_number"])
        if "raw_material_id" in updates or "source_id" in updates:
            self._ensure_references(
                updates.get("raw_material_id", batch.raw_material_id),
                updates.get("source_id", batch.source_id),
            )
        if data.quantity is not None:
            updates["quantity_value"] = data.quantity.value
            updates["quantity_unit"] = data.quantity.unit
        return self._repo.update(batch, updates)

    def review_batch(self, batch_id: int, data: BatchReviewRequest, reviewer_id: int) -> Batch:
        batch = self.get_batch(batch_id)
        updates = data.model_dump(exclude_unset=True)
        if updates.get("approval_status") is None:
            updates.pop("approval_status", None)
        old_status = batch.approval_status
        result = self._repo.update(batch, updates)
        logger.info(
            "batch_reviewed batch_id=%s reviewer_id=%s approval_status=%s->%s",
            batch_id,
            reviewer_id,
            old_status,
            result.approval_status,
        )
        return result

    def delete_batch(self, batch_id: int) -> None:
        batch = self.get_batch(batch_id)
        self._repo.delete(batch)
        logger.info("batch_deleted batch_id=%s", batch_id)

    def _ensure_unique_number(self, batch_number: str) -> None:
        if self._repo.get_by_batch_number(batch_number):
            raise to_http_exception(DuplicateEntityException("Batch", "batch_number", batch_number))

    def _ensure_references(self, raw_material_id: Optional[int], source_id: Optional[int]) -> None:
        if raw_material_id is None or not self._material_repo.get_by_id(raw_material_id):
            raise to_http_exception(EntityNotFoundException("Raw material", raw_material_id))
        if source_id is None or not self._supplier_repo.get_by_id(source_id):
            raise to_http_exception(EntityNotFoundException("Supplier", source_id))
