from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models.batch import Batch
from app.repositories.base import BaseRepository


class BatchRepository(BaseRepository[Batch]):

    def __init__(self, db: Session):
        super().__init__(Batch, db)

    def list_filtered(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        source_id: Optional[int] = None,
        buyer: Optional[str] = None,
    ) -> List[Batch]:
        q = self.db.query(Batch)
        if search:
            q = q.filter(or_(
                Batch.batch_number.ilike(f"%{search}%"),
                Batch.buyer.ilike(f"%{search}%"),
            ))
        if status:
            q = q.filter(Batch.status == status)
        if source_id is not None:
            q = q.filter(Batch.source_id == source_id)
        if buyer:
            q = q.filter(Batch.buyer == buyer)
        return q.order_by(Batch.created_at.desc(), Batch.id.desc()).all()

    def get_by_batch_number(self, batch_number: str) -> Optional[Batch]:
        return self.db.query(Batch).filter(Batch.batch_number == batch_number).first()

    def get_rejected(self) -> List[Batch]:
        return (
            self.db.query(Batch)
            .filter(Batch.approval_status == "Rejected")
            .order_by(Batch.id)
            .all()
        )

    def get_recent_active(self, limit: int = 5) -> List[Batch]:
        return (
            self.db.query(Batch)
            .filter(Batch.status == "Active")
            .order_by(Batch.created_at.desc(), Batch.id.desc())
            .limit(limit)
            .all()
        )

    def count_by_source(self, supplier_id: int) -> int:
        return self.db.query(Batch).filter(Batch.source_id == supplier_id).count()

    def count_by_raw_material(self, raw_material_id: int) -> int:
        return self.db.query(Batch).filter(Batch.raw_material_id == raw_material_id).count()
