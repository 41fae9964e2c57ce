from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from inventory_api.dependencies import get_db, require_admin
from inventory_api.schemas.common import MessageResponse
from inventory_api.schemas.user import UserCreate, UserRead, UserUpdate
from inventory_api.services import user_service

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=List[UserRead])
def list_users(db: Session = Depends(get_db), _admin=Depends(require_admin)):
    return user_service.list_users(db)


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, db: Session = Depends(get_db), _admin=Depends(require_admin)):
    return user_service.get_user(db, user_id)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db), _admin=Depends(require_admin)):
    return user_service.create_user(
        db,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        role=payload.role,
    )


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    _admin=Depends(require_admin),
):
    return user_service.update_user(db, user_id, payload.model_dump(exclude_unset=True))


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, db: Session = Depends(get_db), admin=Depends(require_admin)):
    return {"message": user_service.delete_user(db, user_id, acting_user_id=admin.id)}


__all__ = ["router"]
