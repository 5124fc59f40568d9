"""
Base Repository — generic CRUD over one SQLAlchemy model (Repository Pattern)
"""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from app.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):

    def __init__(self, model: Type[ModelT], db: Session):
        self.model = model
        self.db = db

    def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def get_all(self) -> List[ModelT]:
        return self.db.query(self.model).all()

    def count(self, **filters: Any) -> int:
        q = self.db.query(self.model)
        for field, value in filters.items():
            q = q.filter(getattr(self.model, field) == value)
        return q.count()

    def create(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelT, updates: Dict[str, Any]) -> ModelT:
        for field, value in updates.items():
            setattr(entity, field, value)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.commit()
