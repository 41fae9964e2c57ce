from inventory_api.services.category_service import delete_category
from inventory_api.services.export_service import build_report_workbook
from inventory_api.services.item_service import delete_item
from inventory_api.services.report_service import REPORTS
from inventory_api.services.sale_service import create_sale, delete_sale, update_sale
from inventory_api.services.stats_service import dashboard_stats

__all__ = [
    "REPORTS",
    "build_report_workbook",
    "create_sale",
    "dashboard_stats",
    "delete_category",
    "delete_item",
    "delete_sale",
    "update_sale",
]
