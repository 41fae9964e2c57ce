from datetime import datetime
from typing import List, Optional

from inventory_api.schemas.common import ApiModel, PaginationMeta, ShortName


class CategoryBase(ApiModel):
    name: ShortName
    description: str = ""


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(ApiModel):
    name: Optional[ShortName] = None
    description: Optional[str] = None


class CategoryRef(ApiModel):
    id: int
    name: str


class CategoryRead(CategoryBase):
    id: int
    created_at: datetime
    updated_at: datetime


class CategoryPage(ApiModel):
    categories: List[CategoryRead]
    pagination: PaginationMeta
