import unittest
from io import BytesIO

from openpyxl import load_workbook

from inventory_api.services.export_service import (
    build_report_workbook,
    humanize_key,
    report_filename,
)


class ExportServiceTest(unittest.TestCase):
    def test_workbook_has_report_and_summary_sheets(self):
        report = {
            "sales_by_item": [
                {
                    "item_id": 1,
                    "item_name": "Hammer",
                    "category_name": "Tools",
                    "total_quantity": 3,
                    "total_revenue": 60.0,
                    "sale_count": 2,
                    "average_price": 20.0,
                }
            ],
            "summary": {"total_items": 1, "total_revenue": 60.0},
        }

        workbook = load_workbook(BytesIO(build_report_workbook("sales-by-item", report)))

        self.assertEqual(workbook.sheetnames, ["Report", "Summary"])
        rows = list(workbook["Report"].iter_rows(values_only=True))
        self.assertEqual(rows[0][0], "Item Name")
        self.assertEqual(rows[1], ("Hammer", "Tools", 3, 60.0, 2, 20.0))
        summary = list(workbook["Summary"].iter_rows(values_only=True))
        self.assertEqual(summary, [("Total Items", "Total Revenue"), (1, 60.0)])

    def test_empty_report_still_has_headers(self):
        content = build_report_workbook("sales-by-date", {"sales_by_date": [], "summary": {}})
        workbook = load_workbook(BytesIO(content))
        rows = list(workbook["Report"].iter_rows(values_only=True))
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0][0], "Period")

    def test_unknown_report(self):
        with self.assertRaises(KeyError):
            build_report_workbook("sales-by-weather", {})

    def test_helpers(self):
        self.assertEqual(humanize_key("total_revenue"), "Total Revenue")
        self.assertEqual(humanize_key("averageRevenuePerPeriod"), "Average Revenue Per Period")
        self.assertEqual(report_filename("sales-by-category"), "sales_by_category_report.xlsx")


if __name__ == "__main__":
    unittest.main()
