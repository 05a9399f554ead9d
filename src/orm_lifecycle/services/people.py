"""
orm_lifecycle.services.people

Read-only people listing.
"""

from __future__ import annotations

from pydantic import BaseModel
from sqlalchemy.orm import Session

from orm_lifecycle.db.repositories.people import PersonRepo


class PersonResponse(BaseModel):
    id: int


class PeopleService:
    def __init__(self, session: Session) -> None:
        self._session = session
        self._people = PersonRepo(session)

    def find_all(self) -> list[PersonResponse]:
        # One read-only transaction per call.
        with self._session.begin():
            return [PersonResponse(id=p.id) for p in self._people.find_all()]
