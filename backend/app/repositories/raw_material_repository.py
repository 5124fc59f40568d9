from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.raw_material import RawMaterial
from app.repositories.base import BaseRepository


class RawMaterialRepository(BaseRepository[RawMaterial]):

    def __init__(self, db: Session):
        super().__init__(RawMaterial, db)

    def list_filtered(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        supplier_id: Optional[int] = None,
        hazard_class: Optional[str] = None,
    ) -> List[RawMaterial]:
        q = self.db.query(RawMaterial)
        if search:
            q = q.filter(RawMaterial.name.ilike(f"%{search}%"))
        if status:
            q = q.filter(RawMaterial.status == status)
        if supplier_id is not None:
            q = q.filter(RawMaterial.supplier_id == supplier_id)
        if hazard_class:
            q = q.filter(RawMaterial.hazard_class == hazard_class)
        return q.order_by(RawMaterial.created_at.desc(), RawMaterial.id.desc()).all()

    def get_low_stock(self) -> List[RawMaterial]:
        return (
            self.db.query(RawMaterial)
            .filter(RawMaterial.status == "Low Stock")
            .order_by(RawMaterial.id)
            .all()
        )

    def count_by_supplier(self, supplier_id: int) -> int:
        return self.db.query(RawMaterial).filter(RawMaterial.supplier_id == supplier_id).count()
