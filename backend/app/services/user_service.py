"""
User Service — registration, login and admin account management
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.config import settings
from app.core.exceptions import (
    AuthenticationException,
    AuthorizationException,
    BusinessRuleViolationException,
    DuplicateEntityException,
    EntityNotFoundException,
    to_http_exception,
)
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import LoginRequest, RegisterRequest, TokenResponse, UserResponse, UserUpdate
from app.utils.security import create_access_token, get_password_hash, verify_password

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: Session):
        self._repo = UserRepository(db)

    def register(self, data: RegisterRequest) -> User:
        if data.role == "admin" and data.admin_secret != settings.ADMIN_REGISTRATION_SECRET:
            raise to_http_exception(AuthorizationException("Invalid admin registration secret"))
        if self._repo.get_by_email(data.email):
            raise to_http_exception(DuplicateEntityException("User", "email", data.email))

        user = User(
            name=data.name,
            email=data.email.lower(),
            password_hash=get_password_hash(data.password),
            role=data.role,
            is_active=True,
        )
        result = self._repo.create(user)
        logger.info("user_registered user_id=%s role=%s", result.id, result.role)
        return result

    def login(self, data: LoginRequest) -> TokenResponse:
        user = self._repo.get_by_email(data.email)
        if not user or not verify_password(data.password, user.password_hash):
            logger.warning("login_failed email=%s", data.email)
            raise to_http_exception(AuthenticationException("Invalid email or password"))
        if not user.is_active:
            raise to_http_exception(AuthorizationException("Account is inactive"))

        token = create_access_token(subject=user.id, role=user.role)
        return TokenResponse(access_token=token, user=UserResponse.model_validate(user))

    def list_users(self, search: Optional[str] = None, role: Optional[str] = None) -> List[User]:
        return self._repo.list_filtered(search=search, role=role)

    def get_user(self, user_id: int) -> User:
        user = self._repo.get_by_id(user_id)
        if not user:
            raise to_http_exception(EntityNotFoundException("User", user_id))
        return user

    def update_user(self, user_id: int, data: UserUpdate) -> User:
        user = self.get_user(user_id)
        updates = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
        if "email" in updates:
            existing = self._repo.get_by_email(updates["email"])
            if existing and existing.id != user.id:
                raise to_http_exception(DuplicateEntityException("User", "email", updates["email"]))
            updates["email"] = updates["email"].lower()
        password = updates.pop("password", None)
        if password:
            updates["password_hash"] = get_password_hash(password)
        return self._repo.update(user, updates)

    def delete_user(self, user_id: int, acting_user: User) -> None:
        user = self.get_user(user_id)
        if user.role == "admin":
            message = (
                "You cannot delete your own admin account"
                if user.id == acting_user.id
                else "You cannot delete another admin account"
            )
            raise to_http_exception(BusinessRuleViolationException(message))
        self._repo.delete(user)
        logger.info("user_deleted user_id=%s by=%s", user_id, acting_user.id)
