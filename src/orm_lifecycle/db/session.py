"""
orm_lifecycle.db.session

SQLAlchemy engine + session factory helpers.

Responsibilities:
- Create the engine from settings.
- Create the sessionmaker with explicit-transaction defaults.
- Provide a session scope helper for non-FastAPI contexts.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine
from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.orm import Session, sessionmaker

from orm_lifecycle.settings import Settings


def create_engine(settings: Settings) -> Engine:
    connect_args: dict[str, object] = {}
    if settings.database_url.startswith("sqlite"):
        # The API hands request sessions to a worker thread; each session is still
        # used by one thread at a time.
        connect_args["check_same_thread"] = False
    return sa_create_engine(
        settings.database_url,
        echo=settings.echo_sql,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def create_sessionmaker(engine: Engine) -> sessionmaker[Session]:
    # autobegin=False: every read or write needs an explicit `begin()`.
    # expire_on_commit=False keeps loaded records printable after the session closes.
    return sessionmaker(
        bind=engine,
        autobegin=False,
        expire_on_commit=False,
        autoflush=False,
    )


@contextmanager
def session_scope(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """
    One session, one transaction: commit on success, roll back on error, always close.
    """

    with session_factory() as session:
        with session.begin():
            yield session


# --- Module Notes -----------------------------------------------------------
# The lookup demo does not use `session_scope`; it drives the transaction by hand
# through `orm_lifecycle.db.unit_of_work.UnitOfWork`.
