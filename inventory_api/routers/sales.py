from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from inventory_api.dependencies import get_current_user, get_db, require_admin
from inventory_api.schemas.common import MessageResponse
from inventory_api.schemas.sale import SaleCreate, SalePage, SaleRead, SaleUpdate
from inventory_api.services import sale_service

router = APIRouter(prefix="/api/sales", tags=["Sales"])


@router.get("", response_model=SalePage)
def list_sales(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    search: Optional[str] = Query(None, description="Item or category name"),
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    sort_by: str = Query("saleDate", alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder"),
    db: Session = Depends(get_db),
    _user=Depends(get_current_user),
):
    sales, pagination = sale_service.list_sales(
        db,
        page=page,
        limit=limit,
        search=search,
        start_date=start_date,
        end_date=end_date,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return {"sales": sales, "pagination": pagination}


@router.get("/date-range", response_model=List[SaleRead])
def list_sales_by_date_range(
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
    _user=Depends(get_current_user),
):
    return sale_service.list_sales_by_date_range(db, start_date, end_date)


@router.get("/{sale_id}", response_model=SaleRead)
def get_sale(sale_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return sale_service.get_sale(db, sale_id)


@router.post("", response_model=SaleRead, status_code=status.HTTP_201_CREATED)
def create_sale(payload: SaleCreate, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return sale_service.create_sale(
        db, item_id=payload.item, quantity=payload.quantity, sale_date=payload.sale_date
    )


@router.put("/{sale_id}", response_model=SaleRead)
def update_sale(
    sale_id: int,
    payload: SaleUpdate,
    db: Session = Depends(get_db),
    _admin=Depends(require_admin),
):
    return sale_service.update_sale(
        db,
        sale_id,
        item_id=payload.item,
        quantity=payload.quantity,
        sale_date=payload.sale_date,
    )


@router.delete("/{sale_id}", response_model=MessageResponse)
def delete_sale(sale_id: int, db: Session = Depends(get_db), _admin=Depends(require_admin)):
    return {"message": sale_service.delete_sale(db, sale_id)}


__all__ = ["router"]
