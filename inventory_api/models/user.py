from sqlalchemy import Boolean, Column, DateTime, Integer, String

from inventory_api.core.constants import ROLE_ADMIN, ROLE_USER
from inventory_api.core.dates import utcnow
from inventory_api.database.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String(120), nullable=False)
    email = Column(String(254), nullable=False, unique=True)
    password_hash = Column(String, nullable=False)

    role = Column(String(20), nullable=False, default=ROLE_USER)
    is_active = Column(Boolean, nullable=False, default=True)
    last_login = Column(DateTime)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


__all__ = ["User"]
