from datetime import datetime
from typing import List, Optional

from pydantic import Field

from inventory_api.schemas.category import CategoryRef
from inventory_api.schemas.common import ApiModel, PaginationMeta


class SaleCreate(ApiModel):
    item: int
    quantity: int = Field(gt=0)
    sale_date: Optional[datetime] = None


class SaleUpdate(ApiModel):
    item: Optional[int] = None
    quantity: Optional[int] = Field(None, gt=0)
    sale_date: Optional[datetime] = None


class SaleItem(ApiModel):
    id: int
    name: str
    price: float
    category: Optional[CategoryRef] = None


class SaleRead(ApiModel):
    id: int
    item: Optional[SaleItem] = None
    quantity: int
    total_amount: float
    sale_date: datetime
    created_at: datetime


class SalePage(ApiModel):
    sales: List[SaleRead]
    pagination: PaginationMeta
