"""
orm_lifecycle.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Hold the explicit list of entities this project maps.
- Create tables for local development and tests.
- Seed the demo rows the lookup demo and `/v1/people` read.
- Leave production schema management to the deployment.
"""

from __future__ import annotations

from sqlalchemy import func, select

from orm_lifecycle.db.models import Department
from orm_lifecycle.db.provider import PersistenceProvider
from orm_lifecycle.db.relationships import (
    ManyToManyAuthor,
    ManyToManyBook,
    OneToManyComment,
    OneToManyPost,
    OneToOnePost,
    OneToOnePostDetails,
    Person,
)
from orm_lifecycle.db.session import session_scope
from orm_lifecycle.observability.logging import get_logger

ALL_ENTITIES = (
    Department,
    Person,
    OneToManyPost,
    OneToManyComment,
    OneToOnePost,
    OneToOnePostDetails,
    ManyToManyAuthor,
    ManyToManyBook,
)

DEMO_DEPARTMENTS = ((1, "Engineering"), (2, "Finance"))
DEMO_PEOPLE = 2

log = get_logger(__name__)


def register_all(provider: PersistenceProvider) -> None:
    for entity in ALL_ENTITIES:
        provider.register_entity(entity)


def init_db(provider: PersistenceProvider, *, seed: bool = True) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist, then optionally seed.
    Production expects the schema to exist already.
    """

    provider.create_schema()
    if seed:
        seed_demo_data(provider)


def seed_demo_data(provider: PersistenceProvider) -> None:
    # Idempotent: only missing departments are inserted, people only into an empty table.
    with session_scope(provider.session_factory) as session:
        added = 0
        if provider.is_registered(Department):
            for dept_id, name in DEMO_DEPARTMENTS:
                if session.get(Department, dept_id) is None:
                    session.add(Department(id=dept_id, name=name))
                    added += 1
        if provider.is_registered(Person):
            if session.scalar(select(func.count()).select_from(Person)) == 0:
                session.add_all([Person() for _ in range(DEMO_PEOPLE)])
                added += DEMO_PEOPLE
    log.info("demo_data_seeded", rows=added)


# --- Module Notes -----------------------------------------------------------
# This helper is intentionally not used for prod; `env=prod` skips it and expects
# the schema to be managed by the deployment.
