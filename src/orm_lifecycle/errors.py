"""
orm_lifecycle.errors

Exceptions raised by the persistence layer of this package.

Storage failures themselves surface as `sqlalchemy.exc.SQLAlchemyError`; the types
here cover misuse of the provider and unit-of-work contracts.
"""

from __future__ import annotations


class OrmLifecycleError(Exception):
    """Base class for all errors raised by orm_lifecycle."""


class EntityNotRegisteredError(OrmLifecycleError):
    def __init__(self, entity: type) -> None:
        super().__init__(f"{entity.__name__} is not registered with the persistence provider")
        self.entity = entity


class TransactionStateError(OrmLifecycleError):
    """An operation was attempted from a transaction state that does not allow it."""

    def __init__(self, operation: str, state: str) -> None:
        super().__init__(f"cannot {operation} a transaction in state {state}")
        self.operation = operation
        self.state = state


class UnitOfWorkClosedError(OrmLifecycleError):
    def __init__(self) -> None:
        super().__init__("unit of work is closed")


class ProviderClosedError(OrmLifecycleError):
    def __init__(self) -> None:
        super().__init__("persistence provider is closed")
