from datetime import date
from typing import List, Optional

from inventory_api.schemas.common import ApiModel


class ReportFilters(ApiModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    category: Optional[int] = None
    group_by: Optional[str] = None


class SalesByItemRow(ApiModel):
    item_id: int
    item_name: str
    category_name: Optional[str] = None
    total_quantity: int
    total_revenue: float
    sale_count: int
    average_price: float


class SalesByItemSummary(ApiModel):
    total_items: int
    total_quantity: int
    total_revenue: float
    total_sales: int


class SalesByItemReport(ApiModel):
    sales_by_item: List[SalesByItemRow]
    summary: SalesByItemSummary
    filters: ReportFilters


class SalesByDateRow(ApiModel):
    period: str
    period_label: str
    total_sales: int
    total_revenue: float
    transaction_count: int
    average_sale_value: float


class SalesByDateSummary(ApiModel):
    total_periods: int
    total_quantity: int
    total_revenue: float
    total_transactions: int
    average_revenue_per_period: float


class SalesByDateReport(ApiModel):
    sales_by_date: List[SalesByDateRow]
    summary: SalesByDateSummary
    filters: ReportFilters


class SalesByCategoryRow(ApiModel):
    category_id: Optional[int] = None
    category_name: str
    item_count: int
    total_quantity: int
    total_revenue: float
    sale_count: int
    revenue_percentage: float


class SalesByCategorySummary(ApiModel):
    total_categories: int
    total_quantity: int
    total_revenue: float
    total_sales: int


class SalesByCategoryReport(ApiModel):
    sales_by_category: List[SalesByCategoryRow]
    summary: SalesByCategorySummary
    filters: ReportFilters
