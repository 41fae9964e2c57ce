from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_api.database import init_db
from inventory_api.models.category import Category
from inventory_api.models.item import Item


def make_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    return engine, sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def add_category(db, name="General", description=""):
    category = Category(name=name, description=description)
    db.add(category)
    db.commit()
    return category


def add_item(db, name="Widget", price=10.0, quantity=5, category=None):
    item = Item(
        name=name,
        price=price,
        quantity=quantity,
        category_id=category.id if category is not None else None,
    )
    db.add(item)
    db.commit()
    return item
