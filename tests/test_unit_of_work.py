from __future__ import annotations

import pytest

from orm_lifecycle.db.models import Department
from orm_lifecycle.db.provider import PersistenceProvider
from orm_lifecycle.db.relationships import Person
from orm_lifecycle.db.unit_of_work import TransactionState
from orm_lifecycle.errors import (
    EntityNotRegisteredError,
    TransactionStateError,
    UnitOfWorkClosedError,
)
from orm_lifecycle.settings import Settings


def test_second_lookup_is_served_from_identity_map(
    provider: PersistenceProvider, selects: list[str]
) -> None:
    with provider.open_unit_of_work() as uow:
        uow.begin()
        assert not uow.cached(Department, 1)
        first = uow.lookup(Department, 1)
        assert uow.cached(Department, 1)
        second = uow.lookup(Department, 1)
        uow.commit()

    assert first is second
    assert str(second) == "Department(id=1, name=Engineering)"
    assert len(selects) == 1


def test_cache_does_not_outlive_unit_of_work(
    provider: PersistenceProvider, selects: list[str]
) -> None:
    for _ in range(2):
        with provider.open_unit_of_work() as uow:
            uow.begin()
            uow.lookup(Department, 1)
            uow.commit()
    assert len(selects) == 2


def test_missing_id_returns_none(provider: PersistenceProvider) -> None:
    with provider.open_unit_of_work() as uow:
        uow.begin()
        assert uow.lookup(Department, 999) is None
        uow.commit()


def test_state_machine_happy_path(provider: PersistenceProvider) -> None:
    uow = provider.open_unit_of_work()
    assert uow.state is TransactionState.not_started
    uow.begin()
    assert uow.state is TransactionState.active
    uow.commit()
    assert uow.state is TransactionState.committed
    uow.close()
    assert uow.closed


def test_rollback_is_terminal(provider: PersistenceProvider) -> None:
    with provider.open_unit_of_work() as uow:
        uow.begin()
        uow.rollback()
        assert uow.state is TransactionState.rolled_back
        with pytest.raises(TransactionStateError):
            uow.commit()
        with pytest.raises(TransactionStateError):
            uow.rollback()
        with pytest.raises(TransactionStateError):
            uow.begin()


def test_illegal_transitions_before_begin(provider: PersistenceProvider) -> None:
    with provider.open_unit_of_work() as uow:
        with pytest.raises(TransactionStateError):
            uow.commit()
        with pytest.raises(TransactionStateError):
            uow.rollback()
        with pytest.raises(TransactionStateError):
            uow.lookup(Department, 1)
        assert uow.state is TransactionState.not_started


def test_begin_twice_is_rejected(provider: PersistenceProvider) -> None:
    with provider.open_unit_of_work() as uow:
        uow.begin()
        with pytest.raises(TransactionStateError) as exc:
            uow.begin()
        assert exc.value.state == "ACTIVE"
        uow.rollback()


def test_closed_unit_of_work_rejects_use(provider: PersistenceProvider) -> None:
    uow = provider.open_unit_of_work()
    uow.close()
    uow.close()
    with pytest.raises(UnitOfWorkClosedError):
        uow.begin()


def test_close_discards_active_transaction(provider: PersistenceProvider) -> None:
    uow = provider.open_unit_of_work()
    uow.begin()
    uow.session.add(Department(id=50, name="Temp"))
    uow.close()
    assert uow.state is TransactionState.rolled_back

    with provider.open_unit_of_work() as check:
        check.begin()
        assert check.lookup(Department, 50) is None
        check.commit()


def test_lookup_of_unregistered_entity(settings: Settings) -> None:
    provider = PersistenceProvider.from_settings(settings)
    provider.register_entity(Department)
    try:
        with provider.open_unit_of_work() as uow:
            uow.begin()
            with pytest.raises(EntityNotRegisteredError):
                uow.lookup(Person, 1)
            uow.rollback()
    finally:
        provider.close()


def test_run_captures_errors(provider: PersistenceProvider) -> None:
    def body(_) -> int:
        raise RuntimeError("boom")

    with provider.open_unit_of_work() as uow:
        outcome = uow.run(body)
        assert not outcome.ok
        assert isinstance(outcome.error, RuntimeError)
        assert outcome.value is None

        ok = uow.run(lambda u: 42)
        assert ok.ok
        assert ok.value == 42
