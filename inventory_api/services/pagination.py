import math
from typing import Any, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from inventory_api.config import get_settings


def normalize_paging(page: Optional[int], limit: Optional[int]) -> tuple[int, int]:
    settings = get_settings()
    page = page if page and page > 0 else 1
    limit = limit if limit and limit > 0 else settings.DEFAULT_PAGE_SIZE
    return page, min(limit, settings.MAX_PAGE_SIZE)


def build_pagination(page: int, limit: int, total: int) -> dict[str, Any]:
    total_pages = math.ceil(total / limit) if limit else 0
    return {
        "current_page": page,
        "total_pages": total_pages,
        "total_items": total,
        "items_per_page": limit,
        "has_next_page": page < total_pages,
        "has_prev_page": page > 1,
    }


def paginate(db: Session, stmt, id_column, page: Optional[int], limit: Optional[int]):
    """Run ``stmt`` for one page; returns ``(rows, pagination)``."""
    page, limit = normalize_paging(page, limit)
    count_stmt = stmt.with_only_columns(func.count(func.distinct(id_column))).order_by(None)
    total = db.execute(count_stmt).scalar_one()
    rows = (
        db.execute(stmt.offset((page - 1) * limit).limit(limit))
        .scalars()
        .all()
    )
    return list(rows), build_pagination(page, limit, total)


__all__ = ["build_pagination", "normalize_paging", "paginate"]
