import unittest
from datetime import datetime

from inventory_api.services.sale_service import create_sale
from inventory_api.services.stats_service import dashboard_stats
from tests.support import add_category, add_item, make_session_factory

NOW = datetime(2026, 6, 15, 12, 0)


class DashboardStatsTest(unittest.TestCase):
    def setUp(self):
        self.engine, Session = make_session_factory()
        self.db = Session()

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def test_empty_database_reports_zeros(self):
        stats = dashboard_stats(self.db, now=NOW)

        self.assertEqual(stats["total_items"], 0)
        self.assertEqual(stats["total_sales"], 0)
        self.assertEqual(stats["today_sales"], 0)
        self.assertEqual(len(stats["monthly_data"]), 12)
        self.assertTrue(all(month["sales"] == 0 for month in stats["monthly_data"]))
        self.assertEqual(stats["top_categories"], [])
        self.assertEqual(stats["recent_sales"], [])
        self.assertEqual(stats["low_quantity_products"], [])

    def test_no_sales_today_is_zero(self):
        item = add_item(self.db, name="Mug", price=5.0, quantity=50)
        create_sale(self.db, item_id=item.id, quantity=2, sale_date=datetime(2026, 6, 14, 23, 59))

        stats = dashboard_stats(self.db, now=NOW)

        self.assertEqual(stats["today_sales"], 0)
        self.assertEqual(stats["total_sales"], 1)

    def test_rollups(self):
        kitchen = add_category(self.db, name="Kitchen")
        garden = add_category(self.db, name="Garden")
        add_category(self.db, name="Empty")
        mug = add_item(self.db, name="Mug", price=5.0, quantity=50, category=kitchen)
        add_item(self.db, name="Plate", price=8.0, quantity=3, category=kitchen)
        hose = add_item(self.db, name="Hose", price=20.0, quantity=12, category=garden)

        create_sale(self.db, item_id=mug.id, quantity=4, sale_date=datetime(2026, 6, 15, 8, 0))
        create_sale(self.db, item_id=hose.id, quantity=5, sale_date=datetime(2026, 6, 15, 9, 0))
        create_sale(self.db, item_id=mug.id, quantity=1, sale_date=datetime(2026, 2, 1, 9, 0))
        create_sale(self.db, item_id=mug.id, quantity=1, sale_date=datetime(2025, 12, 31, 9, 0))

        stats = dashboard_stats(self.db, now=NOW)

        self.assertEqual(stats["total_items"], 3)
        self.assertEqual(stats["total_categories"], 3)
        self.assertEqual(stats["total_sales"], 4)
        self.assertEqual(stats["today_sales"], 120.0)

        monthly = {entry["month"]: entry["sales"] for entry in stats["monthly_data"]}
        self.assertEqual(monthly["Jun"], 120.0)
        self.assertEqual(monthly["Feb"], 5.0)
        self.assertEqual(monthly["Dec"], 0.0)

        self.assertEqual(stats["top_categories"][0], {"name": "Kitchen", "value": 2})
        self.assertEqual(stats["top_categories"][-1], {"name": "Empty", "value": 0})

        self.assertEqual(stats["recent_sales"][0]["product_name"], "Hose")
        self.assertEqual(stats["recent_sales"][0]["amount"], 100.0)

        # Plate (3) and Hose (12 - 5 = 7) are below the threshold of 10.
        self.assertEqual(stats["low_quantity"], 2)
        self.assertEqual(
            stats["low_quantity_products"],
            [{"name": "Plate", "quantity": 3}, {"name": "Hose", "quantity": 7}],
        )


if __name__ == "__main__":
    unittest.main()
