"""
orm_lifecycle.db.unit_of_work

Unit-of-work handle wrapping one SQLAlchemy `Session`.

Responsibilities:
- Enforce the transaction state machine NOT_STARTED -> ACTIVE -> {COMMITTED | ROLLED_BACK}.
- Look records up by primary key through the session identity map (first-level cache).
- Run a transactional body and hand back its outcome instead of unwinding the stack.
- Release the session exactly once.

A unit of work is not thread safe. Open one per thread of control and never share it.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session, SessionTransaction
from sqlalchemy.orm.util import identity_key

from orm_lifecycle.db.base import Base
from orm_lifecycle.errors import (
    EntityNotRegisteredError,
    TransactionStateError,
    UnitOfWorkClosedError,
)
from orm_lifecycle.observability.logging import get_logger

E = TypeVar("E", bound=Base)
T = TypeVar("T")

log = get_logger(__name__)


class TransactionState(str, enum.Enum):
    not_started = "NOT_STARTED"
    active = "ACTIVE"
    committed = "COMMITTED"
    rolled_back = "ROLLED_BACK"


@dataclass(frozen=True)
class TransactionOutcome(Generic[T]):
    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class UnitOfWork:
    def __init__(self, session: Session, *, is_registered: Callable[[type], bool]) -> None:
        self._session = session
        self._is_registered = is_registered
        self._transaction: SessionTransaction | None = None
        self._state = TransactionState.not_started
        self._closed = False

    @property
    def state(self) -> TransactionState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def session(self) -> Session:
        self._ensure_open()
        return self._session

    def begin(self) -> None:
        self._ensure_open()
        self._require(TransactionState.not_started, "begin")
        self._transaction = self._session.begin()
        self._state = TransactionState.active
        log.debug("transaction_begin")

    def lookup(self, entity: type[E], ident: Any) -> E | None:
        """
        Return the `entity` row with primary key `ident`, or None when there is none.

        A repeated lookup inside the same transaction is answered from the identity map
        without another SELECT.
        """

        self._ensure_open()
        self._require(TransactionState.active, "look up in")
        if not self._is_registered(entity):
            raise EntityNotRegisteredError(entity)
        hit = self.cached(entity, ident)
        record = self._session.get(entity, ident)
        log.debug(
            "lookup",
            entity=entity.__name__,
            ident=ident,
            cache_hit=hit,
            found=record is not None,
        )
        return record

    def cached(self, entity: type[Base], ident: Any) -> bool:
        self._ensure_open()
        return identity_key(entity, ident) in self._session.identity_map

    def run(self, body: Callable[[UnitOfWork], T]) -> TransactionOutcome[T]:
        # Failures come back as data; the caller picks commit or rollback.
        try:
            return TransactionOutcome(value=body(self))
        except Exception as exc:
            return TransactionOutcome(error=exc)

    def commit(self) -> None:
        self._ensure_open()
        self._require(TransactionState.active, "commit")
        self._transaction.commit()  # type: ignore[union-attr]
        self._state = TransactionState.committed
        log.info("transaction_commit")

    def rollback(self) -> None:
        self._ensure_open()
        self._require(TransactionState.active, "roll back")
        self._transaction.rollback()  # type: ignore[union-attr]
        self._state = TransactionState.rolled_back
        log.info("transaction_rollback")

    def close(self) -> None:
        if self._closed:
            return
        if self._state is TransactionState.active:
            # Session.close() rolls the open transaction back.
            self._state = TransactionState.rolled_back
            log.warning("transaction_discarded_on_close")
        self._session.close()
        self._closed = True
        log.debug("unit_of_work_closed", state=self._state.value)

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise UnitOfWorkClosedError()

    def _require(self, expected: TransactionState, operation: str) -> None:
        if self._state is not expected:
            raise TransactionStateError(operation, self._state.value)


# --- Module Notes -----------------------------------------------------------
# COMMITTED and ROLLED_BACK are terminal: one transaction per unit of work. Open a
# new unit of work for the next transaction.
