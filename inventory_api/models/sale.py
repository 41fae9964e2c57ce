from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship

from inventory_api.core.dates import utcnow
from inventory_api.database.base import Base


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True)
    item_id = Column(Integer, ForeignKey("items.id"), nullable=False)
    item = relationship("Item", lazy="joined")

    quantity = Column(Integer, nullable=False)
    # Snapshot of item.price * quantity when the quantity was last set.
    total_amount = Column(Float, nullable=False)
    sale_date = Column(DateTime, nullable=False, default=utcnow)

    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_sales_quantity_positive"),
        Index("idx_sales_item", "item_id"),
        Index("idx_sales_sale_date", "sale_date"),
    )


__all__ = ["Sale"]
