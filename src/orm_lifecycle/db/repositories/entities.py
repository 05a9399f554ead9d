from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from orm_lifecycle.db.base import Base

E = TypeVar("E", bound=Base)


class EntityRepo(Generic[E]):
    def __init__(self, session: Session, entity: type[E]) -> None:
        self._session = session
        self._entity = entity

    def add(self, obj: E) -> E:
        self._session.add(obj)
        self._session.flush()
        return obj

    def get(self, ident: Any) -> E | None:
        return self._session.get(self._entity, ident)

    def find_all(self) -> list[E]:
        stmt = select(self._entity)
        return list(self._session.execute(stmt).scalars().all())

    def delete(self, obj: E) -> None:
        self._session.delete(obj)
        self._session.flush()

    def delete_all(self) -> None:
        # Row-by-row through the ORM so relationship cascades run.
        for obj in self.find_all():
            self._session.delete(obj)
        self._session.flush()
