from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from inventory_api.dependencies import get_db, require_admin
from inventory_api.schemas.category import CategoryCreate, CategoryPage, CategoryRead, CategoryUpdate
from inventory_api.schemas.common import MessageResponse
from inventory_api.services import category_service

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.get("", response_model=CategoryPage)
def list_categories(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    categories, pagination = category_service.list_categories(
        db, page=page, limit=limit, search=search
    )
    return {"categories": categories, "pagination": pagination}


@router.get("/{category_id}", response_model=CategoryRead)
def get_category(category_id: int, db: Session = Depends(get_db)):
    return category_service.get_category(db, category_id)


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: CategoryCreate,
    db: Session = Depends(get_db),
    _admin=Depends(require_admin),
):
    return category_service.create_category(db, name=payload.name, description=payload.description)


@router.put("/{category_id}", response_model=CategoryRead)
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    db: Session = Depends(get_db),
    _admin=Depends(require_admin),
):
    return category_service.update_category(
        db, category_id, name=payload.name, description=payload.description
    )


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(category_id: int, db: Session = Depends(get_db), _admin=Depends(require_admin)):
    return {"message": category_service.delete_category(db, category_id)}


__all__ = ["router"]
