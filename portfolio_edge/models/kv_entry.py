# File: portfolio_edge/models/kv_entry.py

"""
KvEntry model.

Backing table for the SQL record store: one row per key, value kept as
the serialized text the writer stored. Rows are written by an external
publishing process; the API only reads them.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_edge.models.base import Base


class KvEntry(Base):
    __tablename__ = "kv_entries"

    # e.g. "project:42"
    key: Mapped[str] = mapped_column(String(512), primary_key=True)
    value: Mapped[str | None] = mapped_column(Text, nullable=True)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
