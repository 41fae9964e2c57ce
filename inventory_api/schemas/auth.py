from typing import Optional

from pydantic import Field

from inventory_api.schemas.common import ApiModel, ShortName
from inventory_api.schemas.user import UserRead


class LoginRequest(ApiModel):
    email: str
    password: str


class LoginResponse(ApiModel):
    token: str
    user: UserRead


class ProfileUpdate(ApiModel):
    name: Optional[ShortName] = None
    email: Optional[str] = Field(None, min_length=3, max_length=254)
    password: Optional[str] = Field(None, min_length=6)
