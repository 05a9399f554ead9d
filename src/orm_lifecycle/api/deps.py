"""
orm_lifecycle.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide the request-scoped DB session dependency.
- Encapsulate app.state access patterns (provider/sessionmaker).
"""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlalchemy.orm import Session, sessionmaker


def sessionmaker_from_app(request: Request) -> sessionmaker[Session]:
    # The sessionmaker is created on app startup in `orm_lifecycle.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


def db_session(
    session_factory: sessionmaker[Session] = Depends(sessionmaker_from_app),
) -> Iterator[Session]:
    # Request-scoped DB session. Transactions are begun explicitly by the service layer.
    with session_factory() as session:
        yield session
