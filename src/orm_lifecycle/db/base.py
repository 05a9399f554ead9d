"""
orm_lifecycle.db.base

SQLAlchemy declarative base.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# --- Module Notes -----------------------------------------------------------
# Every entity inherits from `Base`; the provider only creates tables for the
# subset registered with it.
