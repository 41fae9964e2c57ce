import unittest

from sqlalchemy import func, select

from inventory_api.core.exceptions import AlreadyExistsError, NotFoundError, ValidationError
from inventory_api.models.category import Category
from inventory_api.models.item import Item
from inventory_api.models.sale import Sale
from inventory_api.services import category_service, item_service
from inventory_api.services.sale_service import create_sale
from tests.support import add_category, add_item, make_session_factory


class CatalogServiceTest(unittest.TestCase):
    def setUp(self):
        self.engine, Session = make_session_factory()
        self.db = Session()

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def _count(self, column, *where):
        return self.db.execute(select(func.count(column)).where(*where)).scalar_one()

    def test_delete_item_removes_its_sales(self):
        keep = add_item(self.db, name="Keep", quantity=10)
        drop = add_item(self.db, name="Drop", quantity=10)
        create_sale(self.db, item_id=drop.id, quantity=2)
        create_sale(self.db, item_id=drop.id, quantity=3)
        create_sale(self.db, item_id=keep.id, quantity=1)
        drop_id = drop.id

        message = item_service.delete_item(self.db, drop_id)

        self.assertEqual(message, "Item and related sales deleted")
        self.assertIsNone(self.db.get(Item, drop_id))
        self.assertEqual(self._count(Sale.id, Sale.item_id == drop_id), 0)
        self.assertEqual(self._count(Sale.id), 1)

    def test_delete_missing_item(self):
        with self.assertRaises(NotFoundError):
            item_service.delete_item(self.db, 404)

    def test_delete_category_cascades_to_items_and_sales(self):
        doomed = add_category(self.db, name="Seasonal")
        safe = add_category(self.db, name="Core")
        lights = add_item(self.db, name="Lights", quantity=10, category=doomed)
        tree = add_item(self.db, name="Tree", quantity=10, category=doomed)
        pens = add_item(self.db, name="Pens", quantity=10, category=safe)
        create_sale(self.db, item_id=lights.id, quantity=1)
        create_sale(self.db, item_id=tree.id, quantity=2)
        create_sale(self.db, item_id=pens.id, quantity=3)
        doomed_id = doomed.id

        message = category_service.delete_category(self.db, doomed_id)

        self.assertEqual(message, "Category and related items deleted")
        self.assertIsNone(self.db.get(Category, doomed_id))
        self.assertEqual(self._count(Item.id), 1)
        self.assertEqual(self._count(Sale.id), 1)
        self.assertEqual(self._count(Sale.id, Sale.item_id == pens.id), 1)

    def test_delete_empty_category(self):
        empty = add_category(self.db, name="Empty")
        category_service.delete_category(self.db, empty.id)
        self.assertEqual(self._count(Category.id), 0)

    def test_delete_missing_category(self):
        with self.assertRaises(NotFoundError):
            category_service.delete_category(self.db, 7)

    def test_item_and_category_names_are_unique(self):
        add_category(self.db, name="Books")
        add_item(self.db, name="Atlas")
        with self.assertRaises(AlreadyExistsError) as ctx:
            category_service.create_category(self.db, name="Books")
        self.assertEqual(str(ctx.exception), "Category already exists")
        with self.assertRaises(AlreadyExistsError):
            item_service.create_item(self.db, name="Atlas", price=1.0)

    def test_create_item_with_unknown_category(self):
        with self.assertRaises(NotFoundError) as ctx:
            item_service.create_item(self.db, name="Orphan", price=1.0, category_id=99)
        self.assertEqual(str(ctx.exception), "Category not found")

    def test_update_item_applies_only_supplied_fields(self):
        books = add_category(self.db, name="Books")
        item = item_service.create_item(
            self.db, name="Atlas", price=15.0, quantity=4, description="World maps"
        )

        updated = item_service.update_item(
            self.db, item.id, {"price": 0.0, "category": books.id}
        )

        self.assertEqual(updated.price, 0.0)
        self.assertEqual(updated.description, "World maps")
        self.assertEqual(updated.quantity, 4)
        self.assertEqual(updated.category.name, "Books")

    def test_quantity_override(self):
        item = add_item(self.db, name="Atlas", quantity=4)
        updated = item_service.set_item_quantity(self.db, item.id, 25)
        self.assertEqual(updated.quantity, 25)

    def test_list_items_filters_and_paginates(self):
        books = add_category(self.db, name="Books")
        for index in range(12):
            add_item(
                self.db,
                name="Book {:02d}".format(index),
                price=float(index),
                quantity=index,
                category=books,
            )
        add_item(self.db, name="Lamp", price=30.0)

        items, pagination = item_service.list_items(
            self.db, category_id=books.id, sort_by="price", sort_order="asc", limit=5, page=3
        )

        self.assertEqual([item.name for item in items], ["Book 10", "Book 11"])
        self.assertEqual(
            pagination,
            {
                "current_page": 3,
                "total_pages": 3,
                "total_items": 12,
                "items_per_page": 5,
                "has_next_page": False,
                "has_prev_page": True,
            },
        )

        items, pagination = item_service.list_items(self.db, search="lam")
        self.assertEqual([item.name for item in items], ["Lamp"])

    def test_list_categories_search(self):
        add_category(self.db, name="Garden", description="Outdoor")
        add_category(self.db, name="Kitchen", description="Indoor")
        categories, pagination = category_service.list_categories(self.db, search="door")
        self.assertEqual(pagination["total_items"], 2)
        categories, _ = category_service.list_categories(self.db, search="kit")
        self.assertEqual([category.name for category in categories], ["Kitchen"])

    def test_rejected_item_update_leaves_nothing_pending(self):
        item = add_item(self.db, name="Widget", quantity=10)
        other = add_item(self.db, name="Gadget", quantity=10)

        with self.assertRaises(NotFoundError):
            item_service.update_item(self.db, item.id, {"name": "Renamed", "category": 999})
        with self.assertRaises(AlreadyExistsError):
            item_service.update_item(self.db, item.id, {"price": 99.0, "name": "Gadget"})

        create_sale(self.db, item_id=other.id, quantity=1)

        row = self.db.execute(select(Item.name, Item.price).where(Item.id == item.id)).one()
        self.assertEqual(tuple(row), ("Widget", 10.0))

    def test_rejected_category_update_leaves_nothing_pending(self):
        add_category(self.db, name="Garden")
        kitchen = add_category(self.db, name="Kitchen", description="Indoor")

        with self.assertRaises(AlreadyExistsError):
            category_service.update_category(
                self.db, kitchen.id, name="Garden", description="Changed"
            )
        category_service.create_category(self.db, name="Tools")

        description = self.db.execute(
            select(Category.description).where(Category.id == kitchen.id)
        ).scalar_one()
        self.assertEqual(description, "Indoor")

    def test_blank_names_are_rejected(self):
        with self.assertRaises(ValidationError):
            item_service.create_item(self.db, name="   ", price=1.0)
        with self.assertRaises(ValidationError):
            category_service.create_category(self.db, name="\t")
        item = item_service.create_item(self.db, name="  Atlas  ", price=1.0)
        self.assertEqual(item.name, "Atlas")
        with self.assertRaises(ValidationError):
            item_service.update_item(self.db, item.id, {"name": "  "})

    def test_search_treats_wildcards_literally(self):
        add_item(self.db, name="Cable_USB")
        add_item(self.db, name="Cable USB")
        add_category(self.db, name="100% Cotton")
        add_category(self.db, name="Wool")

        items, _ = item_service.list_items(self.db, search="e_U")
        self.assertEqual([item.name for item in items], ["Cable_USB"])
        categories, _ = category_service.list_categories(self.db, search="%")
        self.assertEqual([category.name for category in categories], ["100% Cotton"])


if __name__ == "__main__":
    unittest.main()
