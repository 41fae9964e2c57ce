from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from inventory_api.core.dates import utcnow
from inventory_api.database.base import Base


class Item(Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False, unique=True)
    description = Column(String, nullable=False, default="")

    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False, default=0)

    # Deleting a category is handled by category_service, not the database.
    category_id = Column(Integer, ForeignKey("categories.id"))
    category = relationship("Category", lazy="joined")

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_items_price_non_negative"),
        CheckConstraint("quantity >= 0", name="ck_items_quantity_non_negative"),
        Index("idx_items_category", "category_id"),
        Index("idx_items_quantity", "quantity"),
    )


__all__ = ["Item"]
