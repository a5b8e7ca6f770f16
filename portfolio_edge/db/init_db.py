"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata.
"""

from typing import Optional

from sqlalchemy.engine import Engine

from portfolio_edge.db.session import engine as default_engine
from portfolio_edge.models.base import Base
from portfolio_edge.models import kv_entry  # noqa: F401


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine or default_engine)
