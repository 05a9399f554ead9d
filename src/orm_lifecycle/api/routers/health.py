"""
orm_lifecycle.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) with DB connectivity validation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from orm_lifecycle.api.deps import db_session

router = APIRouter()


@router.get("/healthz")
def healthz() -> dict[str, str]:
    # Liveness: process is up and serving HTTP.
    return {"status": "ok"}


@router.get("/readyz")
def readyz(session: Session = Depends(db_session)) -> dict[str, str]:
    # Readiness: verify the database is reachable.
    with session.begin():
        session.execute(text("SELECT 1"))
    return {"status": "ready"}
