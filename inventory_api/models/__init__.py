import importlib

from inventory_api.models.category import Category
from inventory_api.models.item import Item
from inventory_api.models.sale import Sale
from inventory_api.models.user import User


def import_all_models() -> None:
    for module_name in (
        "inventory_api.models.category",
        "inventory_api.models.item",
        "inventory_api.models.sale",
        "inventory_api.models.user",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Category",
    "Item",
    "Sale",
    "User",
    "import_all_models",
]
