from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.supplier import Supplier
from app.repositories.base import BaseRepository


class SupplierRepository(BaseRepository[Supplier]):

    def __init__(self, db: Session):
        super().__init__(Supplier, db)

    def list_filtered(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        quality_issues_count: Optional[int] = None,
    ) -> List[Supplier]:
        q = self.db.query(Supplier)
        if search:
            q = q.filter(Supplier.name.ilike(f"%{search}%"))
        if status:
            q = q.filter(Supplier.status == status)
        suppliers = q.order_by(Supplier.created_at.desc(), Supplier.id.desc()).all()
        if quality_issues_count is not None:
            # JSON array length is not portable across dialects; filter in memory.
            suppliers = [
                s for s in suppliers
                if isinstance(s.quality_issues, list) and len(s.quality_issues) == quality_issues_count
            ]
        return suppliers

    def list_all_ordered(self) -> List[Supplier]:
        return self.db.query(Supplier).order_by(Supplier.id).all()
