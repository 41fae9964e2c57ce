"""
Sales and the stock bookkeeping tied to them.

Item.quantity is a running counter kept in step with the sales recorded
against the item: creating a sale takes stock, shrinking or deleting a sale
gives it back. Each operation validates, then writes the sale and the item
adjustment in a single unit of work, so a failure leaves neither write behind.

Stock moves are conditional ``UPDATE ... SET quantity = quantity + :delta``
statements rather than read-modify-write in Python: the database decides
whether enough stock is left at the moment of the write.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import or_, select, update
from sqlalchemy.orm import Session

from inventory_api.core.dates import end_of_day, start_of_day, to_naive_utc, utcnow
from inventory_api.core.exceptions import InsufficientStockError, NotFoundError, ValidationError
from inventory_api.core.text import LIKE_ESCAPE, contains_pattern
from inventory_api.database.session import unit_of_work
from inventory_api.models.category import Category
from inventory_api.models.item import Item
from inventory_api.models.sale import Sale
from inventory_api.services.pagination import paginate

logger = logging.getLogger(__name__)

SALE_SORT_COLUMNS = {
    "saleDate": Sale.sale_date,
    "totalAmount": Sale.total_amount,
    "quantity": Sale.quantity,
    "createdAt": Sale.created_at,
}


def get_sale(db: Session, sale_id: int) -> Sale:
    sale = db.get(Sale, sale_id)
    if sale is None:
        raise NotFoundError("Sale")
    return sale


def _load_item(db: Session, item_id: int) -> Item:
    item = db.get(Item, item_id)
    if item is None:
        raise NotFoundError("Item")
    return item


def _adjust_stock(db: Session, item: Item, delta: int) -> None:
    """Move ``item.quantity`` by ``delta``; a decrement only matches while enough stock is left."""
    stmt = update(Item).where(Item.id == item.id)
    if delta < 0:
        stmt = stmt.where(Item.quantity >= -delta)
    result = db.execute(
        stmt.values(quantity=Item.quantity + delta).execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        if delta >= 0:
            # Item removed underneath us; there is nothing to give the stock back to.
            return
        available = db.execute(select(Item.quantity).where(Item.id == item.id)).scalar_one_or_none()
        if available is None:
            raise NotFoundError("Item")
        raise InsufficientStockError(available)
    db.expire(item, ["quantity"])


def list_sales(
    db: Session,
    *,
    page: Optional[int] = None,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    start_date=None,
    end_date=None,
    sort_by: str = "saleDate",
    sort_order: str = "desc",
):
    stmt = (
        select(Sale)
        .join(Item, Sale.item_id == Item.id)
        .outerjoin(Category, Item.category_id == Category.id)
    )
    search = (search or "").strip()
    if search:
        pattern = contains_pattern(search)
        stmt = stmt.where(
            or_(
                Item.name.ilike(pattern, escape=LIKE_ESCAPE),
                Category.name.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )

    start = start_of_day(start_date)
    end = end_of_day(end_date)
    if start is not None:
        stmt = stmt.where(Sale.sale_date >= start)
    if end is not None:
        stmt = stmt.where(Sale.sale_date <= end)

    column = SALE_SORT_COLUMNS.get(sort_by, Sale.sale_date)
    ordering = column.asc() if sort_order == "asc" else column.desc()
    stmt = stmt.order_by(ordering, Sale.id.desc())

    sales, pagination = paginate(db, stmt, Sale.id, page, limit)
    logger.debug(
        "Fetched sales page=%s search=%r range=%s..%s -> %d of %d",
        pagination["current_page"], search, start_date, end_date,
        len(sales), pagination["total_items"],
    )
    return sales, pagination


def list_sales_by_date_range(db: Session, start_date, end_date) -> list[Sale]:
    start = start_of_day(start_date)
    end = end_of_day(end_date)
    if start is None or end is None:
        raise ValidationError("Start date and end date are required")
    rows = (
        db.execute(
            select(Sale)
            .where(Sale.sale_date >= start, Sale.sale_date <= end)
            .order_by(Sale.sale_date.desc())
        )
        .scalars()
        .all()
    )
    return list(rows)


def create_sale(
    db: Session,
    *,
    item_id: int,
    quantity: int,
    sale_date: Optional[datetime] = None,
) -> Sale:
    item = _load_item(db, item_id)
    if quantity <= 0:
        raise ValidationError("Quantity must be a positive integer")

    with unit_of_work(db):
        _adjust_stock(db, item, -quantity)
        sale = Sale(
            item_id=item.id,
            quantity=quantity,
            total_amount=item.price * quantity,
            sale_date=to_naive_utc(sale_date) or utcnow(),
        )
        db.add(sale)

    db.refresh(sale)
    logger.info(
        "Sale %s: %d x item %s, stock now %d", sale.id, quantity, item.id, item.quantity,
        extra={"sale_id": sale.id, "item_id": item.id},
    )
    return sale


def update_sale(
    db: Session,
    sale_id: int,
    *,
    item_id: Optional[int] = None,
    quantity: Optional[int] = None,
    sale_date: Optional[datetime] = None,
) -> Sale:
    """Change a sale and move stock to match.

    Same item, new quantity: the item is adjusted by ``old - new``.
    New item: the old item (if it still exists) gets the old quantity back and
    the new item gives up the resulting quantity.
    """
    sale = get_sale(db, sale_id)
    if quantity is not None and quantity <= 0:
        raise ValidationError("Quantity must be a positive integer")

    new_quantity = sale.quantity if quantity is None else quantity
    moving = item_id is not None and item_id != sale.item_id

    with unit_of_work(db):
        if moving:
            target = _load_item(db, item_id)
            _adjust_stock(db, target, -new_quantity)
            previous = db.get(Item, sale.item_id)
            if previous is not None:
                _adjust_stock(db, previous, sale.quantity)
            logger.info(
                "Sale %s moved from item %s to item %s (%d -> %d)",
                sale.id, sale.item_id, target.id, sale.quantity, new_quantity,
                extra={"sale_id": sale.id, "item_id": target.id},
            )
            sale.item_id = target.id
            sale.item = target
            sale.quantity = new_quantity
            sale.total_amount = target.price * new_quantity
        elif new_quantity != sale.quantity:
            item = _load_item(db, sale.item_id)
            _adjust_stock(db, item, sale.quantity - new_quantity)
            logger.info(
                "Sale %s quantity %d -> %d on item %s",
                sale.id, sale.quantity, new_quantity, item.id,
                extra={"sale_id": sale.id, "item_id": item.id},
            )
            sale.quantity = new_quantity
            sale.total_amount = item.price * new_quantity

        if sale_date is not None:
            sale.sale_date = to_naive_utc(sale_date)

    db.refresh(sale)
    return sale


def delete_sale(db: Session, sale_id: int) -> str:
    sale = get_sale(db, sale_id)
    item_id, quantity = sale.item_id, sale.quantity
    with unit_of_work(db):
        item = db.get(Item, item_id)
        if item is not None:
            _adjust_stock(db, item, quantity)
        db.delete(sale)
    logger.info(
        "Deleted sale %s, restored %d to item %s", sale_id, quantity, item_id,
        extra={"sale_id": sale_id, "item_id": item_id},
    )
    return "Sale removed and stock restored"


__all__ = [
    "SALE_SORT_COLUMNS",
    "create_sale",
    "delete_sale",
    "get_sale",
    "list_sales",
    "list_sales_by_date_range",
    "update_sale",
]
