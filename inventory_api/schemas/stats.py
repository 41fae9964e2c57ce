from typing import List

from inventory_api.schemas.common import ApiModel


class MonthlySales(ApiModel):
    month: str
    sales: float


class CategoryCount(ApiModel):
    name: str
    value: int


class RecentSale(ApiModel):
    product_name: str
    quantity: int
    amount: float


class LowQuantityProduct(ApiModel):
    name: str
    quantity: int


class DashboardStats(ApiModel):
    total_items: int
    total_categories: int
    total_sales: int
    low_quantity: int
    today_sales: float
    monthly_data: List[MonthlySales]
    top_categories: List[CategoryCount]
    recent_sales: List[RecentSale]
    low_quantity_products: List[LowQuantityProduct]
