"""
Supplier Service — Service Layer (SRP / DIP)
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    to_http_exception,
)
from app.models.supplier import Supplier
from app.repositories.batch_repository import BatchRepository
from app.repositories.raw_material_repository import RawMaterialRepository
from app.repositories.supplier_repository import SupplierRepository
from app.schemas.supplier import Certification, QualityIssue, SupplierCreate, SupplierUpdate
from app.utils.clock import Clock, utc_now

logger = logging.getLogger(__name__)

# Columns an update may clear with an explicit null; nulls for any other field are ignored.
NULLABLE_FIELDS = {"last_audit", "contact_email", "contact_phone", "notes"}


class SupplierService:

    def __init__(self, db: Session, clock: Clock = utc_now):
        self._repo = SupplierRepository(db)
        self._material_repo = RawMaterialRepository(db)
        self._batch_repo = BatchRepository(db)
        self._clock = clock

    def list_suppliers(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        quality_issues_count: Optional[int] = None,
    ) -> List[Supplier]:
        return self._repo.list_filtered(
            search=search,
            status=status,
            quality_issues_count=quality_issues_count,
        )

    def get_supplier(self, supplier_id: int) -> Supplier:
        supplier = self._repo.get_by_id(supplier_id)
        if not supplier:
            raise to_http_exception(EntityNotFoundException("Supplier", supplier_id))
        return supplier

    def create_supplier(self, data: SupplierCreate) -> Supplier:
        values = data.model_dump(exclude={"certifications", "quality_issues", "address"})
        supplier = Supplier(
            **values,
            certifications=self._dump_certifications(data.certifications),
            quality_issues=self._dump_quality_issues(data.quality_issues),
            address=data.address.model_dump() if data.address else None,
        )
        result = self._repo.create(supplier)
        logger.info("supplier_created supplier_id=%s status=%s", result.id, result.status)
        return result

    def update_supplier(self, supplier_id: int, data: SupplierUpdate) -> Supplier:
        supplier = self.get_supplier(supplier_id)
        values = data.model_dump(exclude_unset=True, exclude={"certifications", "quality_issues", "address"})
        updates = {k: v for k, v in values.items() if v is not None or k in NULLABLE_FIELDS}
        if data.certifications is not None:
            updates["certifications"] = self._dump_certifications(data.certifications)
        if data.quality_issues is not None:
            updates["quality_issues"] = self._dump_quality_issues(data.quality_issues)
        if "address" in data.model_fields_set:
            updates["address"] = data.address.model_dump() if data.address else None
        return self._repo.update(supplier, updates)

    def delete_supplier(self, supplier_id: int) -> None:
        supplier = self.get_supplier(supplier_id)
        material_refs = self._material_repo.count_by_supplier(supplier_id)
        batch_refs = self._batch_repo.count_by_source(supplier_id)
        if material_refs or batch_refs:
            usages = []
            if material_refs:
                usages.append(f"{material_refs} raw material(s)")
            if batch_refs:
                usages.append(f"{batch_refs} batch(es)")
            raise to_http_exception(BusinessRuleViolationException(
                f"Cannot delete supplier. It is currently used in {' and '.join(usages)}. "
                "Please remove or update these references first.",
                {"raw_materials": material_refs, "batches": batch_refs},
            ))
        self._repo.delete(supplier)
        logger.info("supplier_deleted supplier_id=%s", supplier_id)

    @staticmethod
    def _dump_certifications(certifications: List[Certification]) -> list:
        return [c.model_dump(mode="json", by_alias=True) for c in certifications]

    def _dump_quality_issues(self, issues: List[QualityIssue]) -> list:
        dumped = []
        for issue in issues:
            entry = issue.model_dump(mode="json")
            if entry["date"] is None:
                entry["date"] = self._clock().isoformat()
            dumped.append(entry)
        return dumped
