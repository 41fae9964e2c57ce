from inventory_api.database.base import Base
from inventory_api.database.engine import engine, init_db
from inventory_api.database.session import SessionLocal, get_db, unit_of_work

__all__ = ["Base", "SessionLocal", "engine", "get_db", "init_db", "unit_of_work"]
