from datetime import datetime
from typing import Optional

from sqlalchemy import extract, func, select
from sqlalchemy.orm import Session

from inventory_api.config import get_settings
from inventory_api.core.constants import (
    LOW_STOCK_LIST_LIMIT,
    MONTH_LABELS,
    RECENT_SALES_LIMIT,
    TOP_CATEGORIES_LIMIT,
)
from inventory_api.core.dates import start_of_day, utcnow
from inventory_api.models.category import Category
from inventory_api.models.item import Item
from inventory_api.models.sale import Sale


def _count(db: Session, column) -> int:
    return db.execute(select(func.count(column))).scalar_one()


def _monthly_sales(db: Session, year: int) -> list[dict]:
    month = extract("month", Sale.sale_date)
    rows = db.execute(
        select(month.label("month"), func.sum(Sale.total_amount))
        .where(
            Sale.sale_date >= datetime(year, 1, 1),
            Sale.sale_date < datetime(year + 1, 1, 1),
        )
        .group_by(month)
    ).all()
    totals = {int(month_number): float(total or 0) for month_number, total in rows}
    return [
        {"month": label, "sales": totals.get(index, 0.0)}
        for index, label in enumerate(MONTH_LABELS, start=1)
    ]


def _top_categories(db: Session) -> list[dict]:
    item_count = func.count(Item.id)
    rows = db.execute(
        select(Category.name, item_count)
        .outerjoin(Item, Item.category_id == Category.id)
        .group_by(Category.id, Category.name)
        .order_by(item_count.desc(), Category.name)
        .limit(TOP_CATEGORIES_LIMIT)
    ).all()
    return [{"name": name, "value": int(count)} for name, count in rows]


def _recent_sales(db: Session) -> list[dict]:
    sales = (
        db.execute(
            select(Sale).order_by(Sale.sale_date.desc(), Sale.id.desc()).limit(RECENT_SALES_LIMIT)
        )
        .scalars()
        .all()
    )
    return [
        {
            "product_name": sale.item.name if sale.item is not None else "Unknown Item",
            "quantity": sale.quantity,
            "amount": sale.total_amount,
        }
        for sale in sales
    ]


def dashboard_stats(db: Session, *, now: Optional[datetime] = None) -> dict:
    """Counts, today's revenue, this year's revenue per month, top categories,
    recent sales and the low-stock list. Empty tables yield zeros."""
    settings = get_settings()
    now = now or utcnow()
    threshold = settings.LOW_STOCK_THRESHOLD

    low_stock = (
        db.execute(
            select(Item)
            .where(Item.quantity < threshold)
            .order_by(Item.quantity.asc(), Item.name)
            .limit(LOW_STOCK_LIST_LIMIT)
        )
        .scalars()
        .all()
    )
    low_count = db.execute(
        select(func.count(Item.id)).where(Item.quantity < threshold)
    ).scalar_one()

    today_total = db.execute(
        select(func.coalesce(func.sum(Sale.total_amount), 0.0)).where(
            Sale.sale_date >= start_of_day(now)
        )
    ).scalar_one()

    return {
        "total_items": _count(db, Item.id),
        "total_categories": _count(db, Category.id),
        "total_sales": _count(db, Sale.id),
        "low_quantity": low_count,
        "today_sales": float(today_total or 0),
        "monthly_data": _monthly_sales(db, now.year),
        "top_categories": _top_categories(db),
        "recent_sales": _recent_sales(db),
        "low_quantity_products": [
            {"name": item.name, "quantity": item.quantity} for item in low_stock
        ],
    }


__all__ = ["dashboard_stats"]
