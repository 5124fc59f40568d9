"""
Raw Material Service — Service Layer (SRP / DIP)
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    to_http_exception,
)
from app.models.raw_material import RawMaterial
from app.repositories.batch_repository import BatchRepository
from app.repositories.raw_material_repository import RawMaterialRepository
from app.repositories.supplier_repository import SupplierRepository
from app.schemas.raw_material import RawMaterialCreate, RawMaterialUpdate

logger = logging.getLogger(__name__)

# Columns an update may clear with an explicit null; nulls for any other field are ignored.
NULLABLE_FIELDS = {"expiry_date", "lot_number", "description"}


class RawMaterialService:

    def __init__(self, db: Session):
        self._repo = RawMaterialRepository(db)
        self._supplier_repo = SupplierRepository(db)
        self._batch_repo = BatchRepository(db)

    def list_materials(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        supplier_id: Optional[int] = None,
        hazard_class: Optional[str] = None,
    ) -> List[RawMaterial]:
        return self._repo.list_filtered(
            search=search,
            status=status,
            supplier_id=supplier_id,
            hazard_class=hazard_class,
        )

    def get_material(self, material_id: int) -> RawMaterial:
        material = self._repo.get_by_id(material_id)
        if not material:
            raise to_http_exception(EntityNotFoundException("Raw material", material_id))
        return material

    def create_material(self, data: RawMaterialCreate) -> RawMaterial:
        self._ensure_supplier(data.supplier_id)
        values = data.model_dump(exclude={"quantity"})
        material = RawMaterial(
            **values,
            quantity_value=data.quantity.value,
            quantity_unit=data.quantity.unit,
        )
        result = self._repo.create(material)
        logger.info("raw_material_created material_id=%s status=%s", result.id, result.status)
        return result

    def update_material(self, material_id: int, data: RawMaterialUpdate) -> RawMaterial:
        material = self.get_material(material_id)
        updates = {
            k: v
            for k, v in data.model_dump(exclude_unset=True, exclude={"quantity"}).items()
            if v is not None or k in NULLABLE_FIELDS
        }
        if "supplier_id" in updates:
            self._ensure_supplier(updates["supplier_id"])
        if data.quantity is not None:
            updates["quantity_value"] = data.quantity.value
            updates["quantity_unit"] = data.quantity.unit
        return self._repo.update(material, updates)

    def delete_material(self, material_id: int) -> None:
        material = self.get_material(material_id)
        batch_refs = self._batch_repo.count_by_raw_material(material_id)
        if batch_refs:
            raise to_http_exception(BusinessRuleViolationException(
                f"Cannot delete raw material. It is currently used in {batch_refs} batch(es).",
                {"batches": batch_refs},
            ))
        self._repo.delete(material)
        logger.info("raw_material_deleted material_id=%s", material_id)

    def _ensure_supplier(self, supplier_id: Optional[int]) -> None:
        if supplier_id is None or not self._supplier_repo.get_by_id(supplier_id):
            raise to_http_exception(EntityNotFoundException("Supplier", supplier_id))
