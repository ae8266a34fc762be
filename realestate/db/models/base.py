"""
Shared SQLAlchemy base and the soft-delete column contract.
"""
from datetime import datetime, UTC

from sqlalchemy import Boolean, Column, DateTime, Integer, false
from sqlalchemy.orm import declarative_base


def now_utc():
    """Return an aware UTC datetime for created/modified timestamps."""
    return datetime.now(UTC)


Base = declarative_base()


class SoftDeleteMixin:
    """Columns every entity carries: integer id, audit stamps, soft-delete flag.

    Repositories rely on these four attributes and nothing else; rows are
    never physically removed, only flagged with ``is_deleted``.
    """
    id = Column(Integer, primary_key=True, autoincrement=True)
    created_date = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    modified_date = Column(DateTime(timezone=True), nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False, server_default=false())
