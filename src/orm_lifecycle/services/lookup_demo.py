"""
orm_lifecycle.services.lookup_demo

The unit-of-work lookup demo.

Responsibilities:
- Register the Department descriptor with a persistence provider.
- Open one unit of work, begin one transaction and look the same id up twice; the
  second lookup is served from the session identity map.
- Print the second result, then commit, or roll back if anything in the body failed.
- Close the unit of work and the provider on every path.
"""

from __future__ import annotations

import sys
from typing import TextIO

from orm_lifecycle.db.models import Department, render_as_text
from orm_lifecycle.db.provider import PersistenceProvider
from orm_lifecycle.db.unit_of_work import TransactionOutcome, TransactionState, UnitOfWork
from orm_lifecycle.observability.logging import get_logger
from orm_lifecycle.settings import Settings

log = get_logger(__name__)


def describe(department_id: int, record: Department | None) -> str:
    # A missing row is not the same thing as a row with empty columns.
    if record is None:
        return f"Department {department_id} not found"
    return render_as_text(record)


def run_lookup_demo(
    settings: Settings,
    *,
    provider: PersistenceProvider | None = None,
    out: TextIO | None = None,
) -> TransactionOutcome[Department | None]:
    """
    Run the demo once and return the outcome of the transactional body.

    The provider is closed before returning, including one passed in by the caller.
    A failed body is logged and rolled back; its exception is not re-raised.
    """

    provider = provider or PersistenceProvider.from_settings(settings)
    out = out or sys.stdout
    department_id = settings.department_id

    def body(uow: UnitOfWork) -> Department | None:
        uow.begin()
        # Hold the first result: the identity map only keeps weak references.
        first = uow.lookup(Department, department_id)
        department = uow.lookup(Department, department_id)
        log.debug("lookup_repeated", same_instance=first is department)
        print(describe(department_id, department), file=out)
        return department

    try:
        provider.register_entity(Department)
        uow = provider.open_unit_of_work()
        try:
            outcome = uow.run(body)
            if outcome.ok:
                committed = uow.run(UnitOfWork.commit)
                if not committed.ok:
                    outcome = TransactionOutcome(error=committed.error)
            if not outcome.ok:
                log.warning(
                    "lookup_demo_failed",
                    error_type=type(outcome.error).__name__,
                    error=str(outcome.error),
                )
                if uow.state is TransactionState.active:
                    uow.rollback()
        finally:
            uow.close()
    finally:
        provider.close()

    return outcome


# --- Module Notes -----------------------------------------------------------
# Logs go to stderr (see observability.logging); `out` only ever receives the
# rendered record.
