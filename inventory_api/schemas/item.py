from datetime import datetime
from typing import List, Optional

from pydantic import Field

from inventory_api.schemas.category import CategoryRef
from inventory_api.schemas.common import ApiModel, ItemName, PaginationMeta


class ItemCreate(ApiModel):
    name: ItemName
    description: str = ""
    price: float = Field(ge=0)
    quantity: int = Field(0, ge=0)
    category: Optional[int] = None


class ItemUpdate(ApiModel):
    name: Optional[ItemName] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    quantity: Optional[int] = Field(None, ge=0)
    category: Optional[int] = None


class ItemQuantityUpdate(ApiModel):
    quantity: int = Field(ge=0)


class ItemRead(ApiModel):
    id: int
    name: str
    description: str
    price: float
    quantity: int
    category: Optional[CategoryRef] = None
    created_at: datetime
    updated_at: datetime


class ItemPage(ApiModel):
    items: List[ItemRead]
    pagination: PaginationMeta
