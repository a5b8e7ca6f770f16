# File: portfolio_edge/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for the SQLAlchemy models backing the SQL record store.
    """
    pass
