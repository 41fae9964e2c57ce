import argparse
import sys
from datetime import timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sqlalchemy import delete, select

from inventory_api.core.dates import utcnow
from inventory_api.core.logging import setup_logging
from inventory_api.database import SessionLocal, init_db
from inventory_api.models.category import Category
from inventory_api.models.item import Item
from inventory_api.models.sale import Sale
from inventory_api.services.sale_service import create_sale


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample inventory data.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing sales, items and categories before seeding.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()
    init_db()

    db = SessionLocal()
    try:
        if args.reset:
            db.execute(delete(Sale))
            db.execute(delete(Item))
            db.execute(delete(Category))
            db.commit()

        has_category = db.execute(select(Category.id).limit(1)).first()
        if has_category:
            print("Seed skipped: categories already exist.")
            return

        categories = [
            Category(name="Electronics", description="Devices and accessories"),
            Category(name="Stationery", description="Office and school supplies"),
        ]
        db.add_all(categories)
        db.flush()

        items = [
            Item(
                name="USB-C Cable",
                description="1m braided cable",
                price=9.5,
                quantity=40,
                category_id=categories[0].id,
            ),
            Item(
                name="Wireless Mouse",
                description="2.4GHz optical mouse",
                price=24.0,
                quantity=8,
                category_id=categories[0].id,
            ),
            Item(
                name="A5 Notebook",
                description="Ruled, 120 pages",
                price=3.25,
                quantity=120,
                category_id=categories[1].id,
            ),
        ]
        db.add_all(items)
        db.commit()

        now = utcnow()
        create_sale(db, item_id=items[0].id, quantity=3, sale_date=now - timedelta(days=2))
        create_sale(db, item_id=items[1].id, quantity=1, sale_date=now - timedelta(days=1))
        create_sale(db, item_id=items[2].id, quantity=10, sale_date=now)
        print("Seed data created.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
