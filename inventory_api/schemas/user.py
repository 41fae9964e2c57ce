from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from inventory_api.schemas.common import ApiModel, ShortName

Role = Literal["admin", "user"]


class UserCreate(ApiModel):
    name: ShortName
    email: str = Field(min_length=3, max_length=254)
    password: str = Field(min_length=6)
    role: Role = "user"


class UserUpdate(ApiModel):
    name: Optional[ShortName] = None
    email: Optional[str] = Field(None, min_length=3, max_length=254)
    password: Optional[str] = Field(None, min_length=6)
    role: Optional[Role] = None
    is_active: Optional[bool] = None


class UserRead(ApiModel):
    id: int
    name: str
    email: str
    role: Role
    is_active: bool
    last_login: Optional[datetime] = None
    created_at: datetime
