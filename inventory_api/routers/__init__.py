from inventory_api.routers.auth import router as auth_router
from inventory_api.routers.categories import router as categories_router
from inventory_api.routers.health import router as health_router
from inventory_api.routers.items import router as items_router
from inventory_api.routers.reports import router as reports_router
from inventory_api.routers.sales import router as sales_router
from inventory_api.routers.stats import router as stats_router
from inventory_api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "categories_router",
    "health_router",
    "items_router",
    "reports_router",
    "sales_router",
    "stats_router",
    "users_router",
]
