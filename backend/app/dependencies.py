"""
Shared FastAPI dependencies: authentication, role checks and the clock.
"""
from typing import List, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.exceptions import AuthenticationException, AuthorizationException, to_http_exception
from app.database import get_db
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.utils.clock import Clock, utc_now
from app.utils.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None:
        raise to_http_exception(AuthenticationException("Not authorized, no token"))

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise to_http_exception(AuthenticationException("Not authorized, token failed"))

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise to_http_exception(AuthenticationException("Not authorized, token failed"))

    user = UserRepository(db).get_by_id(user_id)
    if user is None or not user.is_active:
        raise to_http_exception(AuthenticationException("Not authorized, user not found"))
    return user


def require_roles(roles: List[str]):
    def checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise to_http_exception(AuthorizationException(
                f"Role '{current_user.role}' is not allowed to perform this action"
            ))
        return current_user
    return checker


require_admin = require_roles(["admin"])


def get_clock() -> Clock:
    return utc_now
