"""
orm_lifecycle.__main__

Entrypoint for running the lookup demo via `python -m orm_lifecycle`.

Responsibilities:
- Load settings and configure logging.
- In dev/test, create the schema and seed the demo department.
- Run the demo; the provider is closed by the demo itself.
"""

from __future__ import annotations

from orm_lifecycle.db.init_db import init_db, register_all
from orm_lifecycle.db.provider import PersistenceProvider
from orm_lifecycle.observability.logging import configure_logging
from orm_lifecycle.services.lookup_demo import run_lookup_demo
from orm_lifecycle.settings import get_settings


def main() -> None:
    settings = get_settings()
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    provider = PersistenceProvider.from_settings(settings)
    if settings.bootstraps_schema:
        try:
            register_all(provider)
            init_db(provider, seed=settings.seed_demo_data)
        except Exception:
            provider.close()
            raise

    run_lookup_demo(settings, provider=provider)


if __name__ == "__main__":
    main()
