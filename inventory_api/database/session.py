import logging
from contextlib import contextmanager

from sqlalchemy.orm import Session, sessionmaker

from inventory_api.database.engine import engine

logger = logging.getLogger(__name__)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session):
    """Commit everything done in the block at once, or nothing at all."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        logger.debug("Rolled back unit of work", exc_info=True)
        raise
