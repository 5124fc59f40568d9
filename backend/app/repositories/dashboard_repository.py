"""
Dashboard Repository — read-only collector for the alerting snapshot
"""
from sqlalchemy.orm import Session

from app.models.batch import Batch
from app.models.raw_material import RawMaterial
from app.models.supplier import Supplier
from app.repositories.batch_repository import BatchRepository
from app.repositories.raw_material_repository import RawMaterialRepository
from app.repositories.supplier_repository import SupplierRepository
from app.services.alerting.snapshot import (
    DashboardSnapshot,
    LowStockMaterialRecord,
    RejectedBatchRecord,
    SupplierRecord,
    build_snapshot,
    build_supplier_record,
)


def to_supplier_record(supplier: Supplier) -> SupplierRecord:
    return build_supplier_record(
        supplier_id=supplier.id,
        name=supplier.name,
        status=supplier.status,
        certifications=supplier.certifications,
        quality_issues=supplier.quality_issues,
    )


def to_low_stock_record(material: RawMaterial) -> LowStockMaterialRecord:
    return LowStockMaterialRecord(
        id=material.id,
        name=material.name,
        quantity_value=material.quantity_value,
        quantity_unit=material.quantity_unit,
        supplier_name=material.supplier.name if material.supplier else None,
    )


def to_rejected_batch_record(batch: Batch) -> RejectedBatchRecord:
    return RejectedBatchRecord(
        id=batch.id,
        batch_number=batch.batch_number,
        notes=batch.notes,
        raw_material_name=batch.raw_material.name if batch.raw_material else None,
        supplier_name=batch.source.name if batch.source else None,
        updated_at=batch.updated_at,
    )


class DashboardRepository:
    """Issues the dashboard reads on one session.

    Reads are not wrapped in a transaction snapshot; rows changed between
    them by other requests are tolerated. Storage errors propagate as-is.
    """

    def __init__(self, db: Session):
        self._supplier_repo = SupplierRepository(db)
        self._material_repo = RawMaterialRepository(db)
        self._batch_repo = BatchRepository(db)

    def collect(self) -> DashboardSnapshot:
        suppliers = [to_supplier_record(s) for s in self._supplier_repo.list_all_ordered()]
        low_stock = [to_low_stock_record(m) for m in self._material_repo.get_low_stock()]
        rejected = [to_rejected_batch_record(b) for b in self._batch_repo.get_rejected()]
        return build_snapshot(
            suppliers=suppliers,
            low_stock_materials=low_stock,
            rejected_batches=rejected,
            total_raw_materials=self._material_repo.count(),
            active_batches=self._batch_repo.count(status="Active"),
        )
