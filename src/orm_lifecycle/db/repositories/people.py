from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from orm_lifecycle.db.relationships import Person
from orm_lifecycle.db.repositories.entities import EntityRepo


class PersonRepo(EntityRepo[Person]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, Person)

    def find_all(self) -> list[Person]:
        stmt = select(Person).order_by(Person.id)
        return list(self._session.execute(stmt).scalars().all())
