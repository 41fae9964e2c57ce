import logging
from typing import Optional

from sqlalchemy import delete, or_, select
from sqlalchemy.orm import Session

from inventory_api.core.exceptions import AlreadyExistsError, NotFoundError
from inventory_api.core.text import LIKE_ESCAPE, clean_name, contains_pattern
from inventory_api.database.session import unit_of_work
from inventory_api.models.category import Category
from inventory_api.models.item import Item
from inventory_api.models.sale import Sale
from inventory_api.services.pagination import paginate

logger = logging.getLogger(__name__)

ITEM_SORT_COLUMNS = {
    "createdAt": Item.created_at,
    "name": Item.name,
    "price": Item.price,
    "quantity": Item.quantity,
    "updatedAt": Item.updated_at,
}


def get_item(db: Session, item_id: int) -> Item:
    item = db.get(Item, item_id)
    if item is None:
        raise NotFoundError("Item")
    return item


def _ensure_category(db: Session, category_id: Optional[int]) -> None:
    if category_id is not None and db.get(Category, category_id) is None:
        raise NotFoundError("Category")


def _ensure_unique_name(db: Session, name: str, *, exclude_id: Optional[int] = None) -> None:
    stmt = select(Item.id).where(Item.name == name)
    if exclude_id is not None:
        stmt = stmt.where(Item.id != exclude_id)
    if db.execute(stmt.limit(1)).first() is not None:
        raise AlreadyExistsError("Item")


def list_items(
    db: Session,
    *,
    page: Optional[int] = None,
    limit: Optional[int] = None,
    search: Optional[str] = None,
    category_id: Optional[int] = None,
    sort_by: str = "createdAt",
    sort_order: str = "desc",
):
    stmt = select(Item)
    search = (search or "").strip()
    if search:
        pattern = contains_pattern(search)
        stmt = stmt.where(
            or_(
                Item.name.ilike(pattern, escape=LIKE_ESCAPE),
                Item.description.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )
    if category_id is not None:
        stmt = stmt.where(Item.category_id == category_id)

    column = ITEM_SORT_COLUMNS.get(sort_by, Item.created_at)
    ordering = column.asc() if sort_order == "asc" else column.desc()
    stmt = stmt.order_by(ordering, Item.id.desc())

    items, pagination = paginate(db, stmt, Item.id, page, limit)
    logger.debug(
        "Fetched items page=%s search=%r category=%s sort=%s %s -> %d",
        pagination["current_page"], search, category_id, sort_by, sort_order, len(items),
    )
    return items, pagination


def list_items_by_category(db: Session, category_id: int) -> list[Item]:
    rows = (
        db.execute(select(Item).where(Item.category_id == category_id).order_by(Item.name))
        .scalars()
        .all()
    )
    return list(rows)


def create_item(
    db: Session,
    *,
    name: str,
    price: float,
    description: str = "",
    quantity: int = 0,
    category_id: Optional[int] = None,
) -> Item:
    name = clean_name(name, "Item name")
    _ensure_unique_name(db, name)
    _ensure_category(db, category_id)

    item = Item(
        name=name,
        description=description or "",
        price=float(price),
        quantity=int(quantity or 0),
        category_id=category_id,
    )
    with unit_of_work(db):
        db.add(item)
    db.refresh(item)
    logger.info(
        "Created item %s (%s) with stock %d", item.id, item.name, item.quantity,
        extra={"item_id": item.id},
    )
    return item


def update_item(db: Session, item_id: int, changes: dict) -> Item:
    """Apply the supplied fields; a ``quantity`` key is an explicit stock override.

    Every check runs before the item is touched, so a rejected update leaves
    nothing pending in the session.
    """
    item = get_item(db, item_id)

    name = None
    if changes.get("name") is not None:
        name = clean_name(changes["name"], "Item name")
        _ensure_unique_name(db, name, exclude_id=item.id)
    if "category" in changes:
        _ensure_category(db, changes["category"])

    with unit_of_work(db):
        if name is not None:
            item.name = name
        if changes.get("description") is not None:
            item.description = changes["description"]
        if changes.get("price") is not None:
            item.price = float(changes["price"])
        if "category" in changes:
            item.category_id = changes["category"]
        if changes.get("quantity") is not None:
            logger.info(
                "Stock override on item %s: %d -> %d",
                item.id, item.quantity, changes["quantity"],
                extra={"item_id": item.id},
            )
            item.quantity = int(changes["quantity"])
    db.refresh(item)
    return item


def set_item_quantity(db: Session, item_id: int, quantity: int) -> Item:
    return update_item(db, item_id, {"quantity": quantity})


def delete_item(db: Session, item_id: int) -> str:
    """Delete the item and every sale recorded against it.

    The sales are discarded, not reversed: there is no stock left to restore.
    """
    item = get_item(db, item_id)
    name = item.name
    with unit_of_work(db):
        removed = db.execute(delete(Sale).where(Sale.item_id == item.id)).rowcount
        db.delete(item)
    logger.info(
        "Deleted item %s (%s) and %d related sales", item_id, name, removed or 0,
        extra={"item_id": item_id},
    )
    return "Item and related sales deleted"


__all__ = [
    "ITEM_SORT_COLUMNS",
    "create_item",
    "delete_item",
    "get_item",
    "list_items",
    "list_items_by_category",
    "set_item_quantity",
    "update_item",
]
