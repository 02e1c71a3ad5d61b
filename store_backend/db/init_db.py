"""
Database initialization helpers.

Only creates missing tables; there is no migration story here. Used by the
test suite and, when AUTO_CREATE_TABLES is on, by local SQLite setups.
"""

from sqlalchemy.engine import Engine

from store_backend.models.base import Base

# Register the tables on Base.metadata
from store_backend.models import product, user  # noqa: F401


def init_db(engine: Engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)
