"""
Users Router — admin-only employee account management
"""
from typing import List, Optional

from fastapi import APIRouter, Depends

from app.dependencies import require_admin
from app.models.user import User
from app.routers.auth import get_user_service
from app.schemas.user import MessageResponse, UserResponse, UserUpdate
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[UserResponse])
def list_users(
    search: Optional[str] = None,
    role: Optional[str] = None,
    service: UserService = Depends(get_user_service),
    _: User = Depends(require_admin),
):
    return service.list_users(search=search, role=role)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
    _: User = Depends(require_admin),
):
    return service.get_user(user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    payload: UserUpdate,
    service: UserService = Depends(get_user_service),
    _: User = Depends(require_admin),
):
    return service.update_user(user_id, payload)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
    current_user: User = Depends(require_admin),
):
    service.delete_user(user_id, acting_user=current_user)
    return {"message": "User removed"}
