from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):

    def __init__(self, db: Session):
        super().__init__(User, db)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(func.lower(User.email) == email.lower()).first()

    def list_filtered(self, search: Optional[str] = None, role: Optional[str] = None) -> List[User]:
        q = self.db.query(User)
        if search:
            q = q.filter(or_(
                User.name.ilike(f"%{search}%"),
                User.email.ilike(f"%{search}%"),
            ))
        if role and role != "all":
            q = q.filter(User.role == role)
        return q.order_by(User.created_at.desc(), User.id.desc()).all()
