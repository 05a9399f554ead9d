from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from orm_lifecycle.api.deps import db_session
from orm_lifecycle.services.people import PeopleService, PersonResponse

router = APIRouter(prefix="/v1/people", tags=["people"])


@router.get("", response_model=list[PersonResponse])
def find_all(session: Session = Depends(db_session)) -> list[PersonResponse]:
    return PeopleService(session).find_all()
