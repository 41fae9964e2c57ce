from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from inventory_api.dependencies import get_db, require_admin
from inventory_api.schemas.common import MessageResponse
from inventory_api.schemas.item import ItemCreate, ItemPage, ItemQuantityUpdate, ItemRead, ItemUpdate
from inventory_api.services import item_service

router = APIRouter(prefix="/api/items", tags=["Items"])


@router.get("", response_model=ItemPage)
def list_items(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    search: Optional[str] = Query(None, description="Matches name or description"),
    category: Optional[int] = Query(None, description="Category id"),
    sort_by: str = Query("createdAt", alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder"),
    db: Session = Depends(get_db),
):
    items, pagination = item_service.list_items(
        db,
        page=page,
        limit=limit,
        search=search,
        category_id=category,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return {"items": items, "pagination": pagination}


@router.get("/category/{category_id}", response_model=List[ItemRead])
def list_items_by_category(category_id: int, db: Session = Depends(get_db)):
    return item_service.list_items_by_category(db, category_id)


@router.get("/{item_id}", response_model=ItemRead)
def get_item(item_id: int, db: Session = Depends(get_db)):
    return item_service.get_item(db, item_id)


@router.post("", response_model=ItemRead, status_code=status.HTTP_201_CREATED)
def create_item(payload: ItemCreate, db: Session = Depends(get_db), _admin=Depends(require_admin)):
    return item_service.create_item(
        db,
        name=payload.name,
        description=payload.description,
        price=payload.price,
        quantity=payload.quantity,
        category_id=payload.category,
    )


@router.put("/{item_id}", response_model=ItemRead)
def update_item(
    item_id: int,
    payload: ItemUpdate,
    db: Session = Depends(get_db),
    _admin=Depends(require_admin),
):
    return item_service.update_item(db, item_id, payload.model_dump(exclude_unset=True))


@router.patch("/{item_id}/quantity", response_model=ItemRead)
def update_item_quantity(
    item_id: int,
    payload: ItemQuantityUpdate,
    db: Session = Depends(get_db),
    _admin=Depends(require_admin),
):
    return item_service.set_item_quantity(db, item_id, payload.quantity)


@router.delete("/{item_id}", response_model=MessageResponse)
def delete_item(item_id: int, db: Session = Depends(get_db), _admin=Depends(require_admin)):
    return {"message": item_service.delete_item(db, item_id)}


__all__ = ["router"]
