from __future__ import annotations

import pytest
from sqlalchemy import inspect

from orm_lifecycle.db.init_db import seed_demo_data
from orm_lifecycle.db.models import Department
from orm_lifecycle.db.provider import PersistenceProvider
from orm_lifecycle.db.relationships import ManyToManyAuthor, ManyToManyBook, Person
from orm_lifecycle.db.repositories.entities import EntityRepo
from orm_lifecycle.db.session import session_scope
from orm_lifecycle.errors import ProviderClosedError
from orm_lifecycle.settings import Settings


@pytest.fixture
def bare_provider(settings: Settings):
    provider = PersistenceProvider.from_settings(settings)
    yield provider
    provider.close()


def test_registration_is_explicit_and_idempotent(bare_provider: PersistenceProvider) -> None:
    assert bare_provider.registered_entities == ()
    bare_provider.register_entity(Department)
    bare_provider.register_entity(Department)
    assert bare_provider.registered_entities == (Department,)
    assert bare_provider.is_registered(Department)
    assert not bare_provider.is_registered(ManyToManyAuthor)


def test_schema_only_covers_registered_entities(bare_provider: PersistenceProvider) -> None:
    bare_provider.register_entity(Department)
    bare_provider.create_schema()
    assert inspect(bare_provider.engine).get_table_names() == ["DEPARTMENT"]


def test_association_table_needs_both_sides(bare_provider: PersistenceProvider) -> None:
    bare_provider.register_entity(ManyToManyAuthor)
    bare_provider.create_schema()
    assert "many_to_many_book_authors" not in inspect(bare_provider.engine).get_table_names()

    bare_provider.register_entity(ManyToManyBook)
    bare_provider.create_schema()
    assert set(inspect(bare_provider.engine).get_table_names()) == {
        "many_to_many_author",
        "many_to_many_book",
        "many_to_many_book_authors",
    }


def test_close_is_idempotent(bare_provider: PersistenceProvider) -> None:
    bare_provider.close()
    bare_provider.close()
    assert bare_provider.closed
    with pytest.raises(ProviderClosedError):
        bare_provider.open_unit_of_work()
    with pytest.raises(ProviderClosedError):
        bare_provider.register_entity(Department)


def test_sqlite_engine_from_settings(settings: Settings) -> None:
    provider = PersistenceProvider.from_settings(settings)
    try:
        assert provider.engine.dialect.name == "sqlite"
        assert provider.engine.echo is False
    finally:
        provider.close()


def test_seed_is_idempotent(provider: PersistenceProvider) -> None:
    seed_demo_data(provider)

    with session_scope(provider.session_factory) as session:
        assert len(EntityRepo(session, Department).find_all()) == 2
        assert len(EntityRepo(session, Person).find_all()) == 2
