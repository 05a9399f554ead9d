"""
orm_lifecycle.db.provider

Persistence provider: the engine, the set of registered entities and the session factory.

Responsibilities:
- Build the engine/sessionmaker from settings.
- Keep an explicit, per-type entity registry (no module scanning).
- Create schema for registered entities only.
- Open units of work and dispose the engine exactly once.
"""

from __future__ import annotations

from sqlalchemy import Engine, Table, inspect
from sqlalchemy.orm import Session, sessionmaker

from orm_lifecycle.db.base import Base
from orm_lifecycle.db.session import create_engine, create_sessionmaker
from orm_lifecycle.db.unit_of_work import UnitOfWork
from orm_lifecycle.errors import ProviderClosedError
from orm_lifecycle.observability.logging import get_logger
from orm_lifecycle.settings import Settings

log = get_logger(__name__)


class PersistenceProvider:
    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session_factory = create_sessionmaker(engine)
        self._entities: list[type[Base]] = []
        self._closed = False
        log.info("provider_opened", dialect=engine.dialect.name)

    @classmethod
    def from_settings(cls, settings: Settings) -> PersistenceProvider:
        return cls(create_engine(settings))

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def session_factory(self) -> sessionmaker[Session]:
        self._ensure_open()
        return self._session_factory

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def registered_entities(self) -> tuple[type[Base], ...]:
        return tuple(self._entities)

    def register_entity(self, entity: type[Base]) -> None:
        self._ensure_open()
        if entity in self._entities:
            return
        self._entities.append(entity)
        log.info("entity_registered", entity=entity.__name__, table=entity.__tablename__)

    def is_registered(self, entity: type) -> bool:
        return entity in self._entities

    def create_schema(self) -> None:
        """
        Create the tables of registered entities, plus association tables whose
        entities on both sides are registered. Existing tables are left alone.
        """

        self._ensure_open()
        tables = self._tables()
        Base.metadata.create_all(self._engine, tables=tables)
        log.info("schema_created", tables=[t.name for t in tables])

    def open_unit_of_work(self) -> UnitOfWork:
        self._ensure_open()
        return UnitOfWork(self._session_factory(), is_registered=self.is_registered)

    def close(self) -> None:
        if self._closed:
            log.debug("provider_already_closed")
            return
        self._engine.dispose()
        self._closed = True
        log.info("provider_closed")

    def _tables(self) -> list[Table]:
        tables: list[Table] = []
        for entity in self._entities:
            tables.append(entity.__table__)  # type: ignore[arg-type]
            for rel in inspect(entity).relationships:
                if rel.secondary is None or not self.is_registered(rel.mapper.class_):
                    continue
                if rel.secondary not in tables:
                    tables.append(rel.secondary)  # type: ignore[arg-type]
        # create_all sorts by foreign-key dependency.
        return tables

    def _ensure_open(self) -> None:
        if self._closed:
            raise ProviderClosedError()


# --- Module Notes -----------------------------------------------------------
# There is no package scan: every entity is registered one by one, either by the
# caller (`services.lookup_demo`) or from `db.init_db.ALL_ENTITIES`.
