from collections import OrderedDict
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from inventory_api.core.constants import MONTH_LABELS, REPORT_GROUPINGS
from inventory_api.core.dates import end_of_day, normalize_date, start_of_day
from inventory_api.core.exceptions import ValidationError
from inventory_api.models.category import Category
from inventory_api.models.item import Item
from inventory_api.models.sale import Sale

UNCATEGORIZED = "Uncategorized"


def _filters(start_date=None, end_date=None, category_id=None, group_by=None) -> dict:
    return {
        "start_date": normalize_date(start_date),
        "end_date": normalize_date(end_date),
        "category": category_id,
        "group_by": group_by,
    }


def _sale_rows(db: Session, start_date=None, end_date=None, category_id: Optional[int] = None):
    stmt = (
        select(
            Sale.id,
            Sale.quantity,
            Sale.total_amount,
            Sale.sale_date,
            Item.id.label("item_id"),
            Item.name.label("item_name"),
            Category.id.label("category_id"),
            Category.name.label("category_name"),
        )
        .join(Item, Sale.item_id == Item.id)
        .outerjoin(Category, Item.category_id == Category.id)
    )
    start = start_of_day(start_date)
    end = end_of_day(end_date)
    if start is not None:
        stmt = stmt.where(Sale.sale_date >= start)
    if end is not None:
        stmt = stmt.where(Sale.sale_date <= end)
    if category_id is not None:
        stmt = stmt.where(Item.category_id == category_id)
    return db.execute(stmt.order_by(Sale.sale_date)).mappings().all()


def _ratio(numerator, denominator) -> float:
    if not denominator:
        return 0.0
    return round(float(numerator) / float(denominator), 2)


def sales_by_item(db: Session, *, start_date=None, end_date=None, category_id=None) -> dict:
    grouped = {}
    for row in _sale_rows(db, start_date, end_date, category_id):
        entry = grouped.setdefault(
            row["item_id"],
            {
                "item_id": row["item_id"],
                "item_name": row["item_name"],
                "category_name": row["category_name"] or UNCATEGORIZED,
                "total_quantity": 0,
                "total_revenue": 0.0,
                "sale_count": 0,
            },
        )
        entry["total_quantity"] += row["quantity"]
        entry["total_revenue"] += row["total_amount"]
        entry["sale_count"] += 1

    rows = sorted(grouped.values(), key=lambda entry: (-entry["total_revenue"], entry["item_name"]))
    for entry in rows:
        entry["total_revenue"] = round(entry["total_revenue"], 2)
        entry["average_price"] = _ratio(entry["total_revenue"], entry["total_quantity"])

    return {
        "sales_by_item": rows,
        "summary": {
            "total_items": len(rows),
            "total_quantity": sum(entry["total_quantity"] for entry in rows),
            "total_revenue": round(sum(entry["total_revenue"] for entry in rows), 2),
            "total_sales": sum(entry["sale_count"] for entry in rows),
        },
        "filters": _filters(start_date, end_date, category_id),
    }


def _period_of(sale_date, group_by: str) -> tuple[str, str]:
    if group_by == "month":
        return (
            "{:04d}-{:02d}".format(sale_date.year, sale_date.month),
            "{} {}".format(MONTH_LABELS[sale_date.month - 1], sale_date.year),
        )
    if group_by == "week":
        iso_year, iso_week, _ = sale_date.isocalendar()
        return (
            "{:04d}-W{:02d}".format(iso_year, iso_week),
            "Week {}, {}".format(iso_week, iso_year),
        )
    return (
        sale_date.date().isoformat(),
        "{} {}, {}".format(MONTH_LABELS[sale_date.month - 1], sale_date.day, sale_date.year),
    )


def sales_by_date(
    db: Session,
    *,
    start_date=None,
    end_date=None,
    category_id=None,
    group_by: str = "day",
) -> dict:
    group_by = (group_by or "day").strip().lower()
    if group_by not in REPORT_GROUPINGS:
        raise ValidationError(
            "groupBy must be one of: {}".format(", ".join(REPORT_GROUPINGS))
        )

    periods = OrderedDict()
    for row in _sale_rows(db, start_date, end_date, category_id):
        period, label = _period_of(row["sale_date"], group_by)
        entry = periods.setdefault(
            period,
            {
                "period": period,
                "period_label": label,
                "total_sales": 0,
                "total_revenue": 0.0,
                "transaction_count": 0,
            },
        )
        entry["total_sales"] += row["quantity"]
        entry["total_revenue"] += row["total_amount"]
        entry["transaction_count"] += 1

    rows = list(periods.values())
    for entry in rows:
        entry["total_revenue"] = round(entry["total_revenue"], 2)
        entry["average_sale_value"] = _ratio(entry["total_revenue"], entry["transaction_count"])

    total_revenue = round(sum(entry["total_revenue"] for entry in rows), 2)
    return {
        "sales_by_date": rows,
        "summary": {
            "total_periods": len(rows),
            "total_quantity": sum(entry["total_sales"] for entry in rows),
            "total_revenue": total_revenue,
            "total_transactions": sum(entry["transaction_count"] for entry in rows),
            "average_revenue_per_period": _ratio(total_revenue, len(rows)),
        },
        "filters": _filters(start_date, end_date, category_id, group_by),
    }


def sales_by_category(db: Session, *, start_date=None, end_date=None, category_id=None) -> dict:
    item_counts_stmt = (
        select(Category.id, Category.name, func.count(Item.id))
        .outerjoin(Item, Item.category_id == Category.id)
        .group_by(Category.id, Category.name)
    )
    if category_id is not None:
        item_counts_stmt = item_counts_stmt.where(Category.id == category_id)

    grouped = {}
    for cat_id, name, item_count in db.execute(item_counts_stmt).all():
        grouped[cat_id] = {
            "category_id": cat_id,
            "category_name": name,
            "item_count": int(item_count),
            "total_quantity": 0,
            "total_revenue": 0.0,
            "sale_count": 0,
        }

    for row in _sale_rows(db, start_date, end_date, category_id):
        entry = grouped.get(row["category_id"])
        if entry is None:
            uncategorized_items = db.execute(
                select(func.count(Item.id)).where(Item.category_id.is_(None))
            ).scalar_one()
            entry = grouped.setdefault(
                None,
                {
                    "category_id": None,
                    "category_name": UNCATEGORIZED,
                    "item_count": int(uncategorized_items),
                    "total_quantity": 0,
                    "total_revenue": 0.0,
                    "sale_count": 0,
                },
            )
        entry["total_quantity"] += row["quantity"]
        entry["total_revenue"] += row["total_amount"]
        entry["sale_count"] += 1

    rows = sorted(
        grouped.values(), key=lambda entry: (-entry["total_revenue"], entry["category_name"])
    )
    grand_total = sum(entry["total_revenue"] for entry in rows)
    for entry in rows:
        entry["total_revenue"] = round(entry["total_revenue"], 2)
        entry["revenue_percentage"] = (
            round(entry["total_revenue"] * 100.0 / grand_total, 1) if grand_total else 0.0
        )

    return {
        "sales_by_category": rows,
        "summary": {
            "total_categories": len(rows),
            "total_quantity": sum(entry["total_quantity"] for entry in rows),
            "total_revenue": round(grand_total, 2),
            "total_sales": sum(entry["sale_count"] for entry in rows),
        },
        "filters": _filters(start_date, end_date, category_id),
    }


REPORTS = {
    "sales-by-item": sales_by_item,
    "sales-by-date": sales_by_date,
    "sales-by-category": sales_by_category,
}


__all__ = ["REPORTS", "sales_by_category", "sales_by_date", "sales_by_item"]
