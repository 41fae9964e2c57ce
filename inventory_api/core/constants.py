ROLE_ADMIN = "admin"
ROLE_USER = "user"
USER_ROLES = (ROLE_ADMIN, ROLE_USER)

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

TOP_CATEGORIES_LIMIT = 5
RECENT_SALES_LIMIT = 5
LOW_STOCK_LIST_LIMIT = 10

REPORT_GROUPINGS = ("day", "week", "month")
