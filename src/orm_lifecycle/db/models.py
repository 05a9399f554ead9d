"""
orm_lifecycle.db.models

The Department entity descriptor.

Responsibilities:
- Map the DEPARTMENT table (DEPT_ID, NAME) onto an in-memory record.
- Render a record as `Department(id=<id>, name=<name>)` for diagnostic output.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from orm_lifecycle.db.base import Base

ABSENT = "null"


class Department(Base):
    __tablename__ = "DEPARTMENT"

    # Both fields are None on a freshly constructed instance; `id` is set once the
    # row has been read from (or written to) the database.
    id: Mapped[int | None] = mapped_column(
        "DEPT_ID", Integer, primary_key=True, autoincrement=False
    )
    name: Mapped[str | None] = mapped_column("NAME", String(255), nullable=True)

    def __str__(self) -> str:
        return render_as_text(self)

    __repr__ = __str__


def _field_text(value: Any) -> str:
    return ABSENT if value is None else str(value)


def render_as_text(record: Department) -> str:
    return f"Department(id={_field_text(record.id)}, name={_field_text(record.name)})"


# --- Module Notes -----------------------------------------------------------
# A lookup that finds nothing returns None, not an empty Department; callers decide
# how to print that case (see `services.lookup_demo.describe`).
