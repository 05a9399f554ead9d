"""
tests.conftest

Shared fixtures: a settings object and a persistence provider over a throwaway SQLite file.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from sqlalchemy import event

from orm_lifecycle.db.init_db import init_db, register_all
from orm_lifecycle.db.provider import PersistenceProvider
from orm_lifecycle.observability.logging import configure_logging
from orm_lifecycle.settings import Settings


@pytest.fixture(scope="session", autouse=True)
def _logging() -> None:
    # Keep structlog off stdout so printed records can be asserted on.
    configure_logging(service_name="orm-lifecycle-test", level="DEBUG")


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(env="test", database_url=f"sqlite:///{tmp_path / 'test.db'}")


@pytest.fixture
def provider(settings: Settings) -> Iterator[PersistenceProvider]:
    provider = PersistenceProvider.from_settings(settings)
    register_all(provider)
    init_db(provider)
    yield provider
    provider.close()


@pytest.fixture
def selects(provider: PersistenceProvider) -> list[str]:
    """SELECT statements sent to the database after the fixture is requested."""

    statements: list[str] = []

    @event.listens_for(provider.engine, "before_cursor_execute")
    def _record(conn, cursor, statement, parameters, context, executemany) -> None:
        if statement.lstrip().upper().startswith("SELECT"):
            statements.append(statement)

    return statements
