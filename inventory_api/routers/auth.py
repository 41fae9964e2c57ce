import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from inventory_api.core.security import create_access_token
from inventory_api.dependencies import get_current_user, get_db
from inventory_api.schemas.auth import LoginRequest, LoginResponse, ProfileUpdate
from inventory_api.schemas.user import UserRead
from inventory_api.services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user = user_service.authenticate(db, payload.email, payload.password)
    if user is None:
        logger.info("Failed login for %s", payload.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    return {"token": create_access_token(user.id, user.role), "user": user}


@router.get("/profile", response_model=UserRead)
def get_profile(user=Depends(get_current_user)):
    return user


@router.put("/profile", response_model=UserRead)
def update_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    return user_service.update_user(db, user.id, payload.model_dump(exclude_unset=True))


__all__ = ["router"]
