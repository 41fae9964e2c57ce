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


def get_category(db: Session, category_id: int) -> Category:
    category = db.get(Category, category_id)
    if category is None:
        raise NotFoundError("Category")
    return category


def _ensure_unique_name(db: Session, name: str, *, exclude_id: Optional[int] = None) -> None:
    stmt = select(Category.id).where(Category.name == name)
    if exclude_id is not None:
        stmt = stmt.where(Category.id != exclude_id)
    if db.execute(stmt.limit(1)).first() is not None:
        raise AlreadyExistsError("Category")


def list_categories(
    db: Session,
    *,
    page: Optional[int] = None,
    limit: Optional[int] = None,
    search: Optional[str] = None,
):
    stmt = select(Category)
    search = (search or "").strip()
    if search:
        pattern = contains_pattern(search)
        stmt = stmt.where(
            or_(
                Category.name.ilike(pattern, escape=LIKE_ESCAPE),
                Category.description.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )
    stmt = stmt.order_by(Category.created_at.desc(), Category.id.desc())
    return paginate(db, stmt, Category.id, page, limit)


def create_category(db: Session, *, name: str, description: str = "") -> Category:
    name = clean_name(name, "Category name")
    _ensure_unique_name(db, name)
    category = Category(name=name, description=description or "")
    with unit_of_work(db):
        db.add(category)
    db.refresh(category)
    logger.info(
        "Created category %s (%s)", category.id, category.name,
        extra={"category_id": category.id},
    )
    return category


def update_category(
    db: Session,
    category_id: int,
    *,
    name: Optional[str] = None,
    description: Optional[str] = None,
) -> Category:
    category = get_category(db, category_id)
    if name is not None:
        name = clean_name(name, "Category name")
        _ensure_unique_name(db, name, exclude_id=category.id)
    with unit_of_work(db):
        if name is not None:
            category.name = name
        if description is not None:
            category.description = description
    db.refresh(category)
    return category


def delete_category(db: Session, category_id: int) -> str:
    """Cascade: sales of every item in the category, the items, then the category."""
    category = get_category(db, category_id)
    name = category.name
    item_ids = list(
        db.execute(select(Item.id).where(Item.category_id == category.id)).scalars().all()
    )
    with unit_of_work(db):
        removed_sales = 0
        if item_ids:
            removed_sales = db.execute(
                delete(Sale).where(Sale.item_id.in_(item_ids))
            ).rowcount or 0
            db.execute(delete(Item).where(Item.id.in_(item_ids)))
        db.delete(category)
    logger.info(
        "Deleted category %s (%s) with %d items and %d sales",
        category_id, name, len(item_ids), removed_sales,
        extra={"category_id": category_id},
    )
    return "Category and related items deleted"


__all__ = [
    "create_category",
    "delete_category",
    "get_category",
    "list_categories",
    "update_category",
]
