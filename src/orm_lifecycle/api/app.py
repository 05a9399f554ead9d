"""
orm_lifecycle.api.app

FastAPI app factory.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Open and close the persistence provider with the application.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from orm_lifecycle import __version__
from orm_lifecycle.api.routers.health import router as health_router
from orm_lifecycle.api.routers.people import router as people_router
from orm_lifecycle.db.init_db import init_db, register_all
from orm_lifecycle.db.provider import PersistenceProvider
from orm_lifecycle.observability.logging import configure_logging, get_logger
from orm_lifecycle.observability.middleware import RequestContextMiddleware
from orm_lifecycle.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        # One provider per app; routers obtain sessions via `orm_lifecycle.api.deps`.
        provider = PersistenceProvider.from_settings(settings)
        register_all(provider)
        app.state.provider = provider
        app.state.sessionmaker = provider.session_factory
        try:
            if settings.bootstraps_schema:
                # Dev/test convenience. Prod expects the schema to exist already.
                init_db(provider, seed=settings.seed_demo_data)
            yield
        finally:
            provider.close()
            log.info("shutdown")

    app = FastAPI(
        title="ORM Lifecycle Example",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(people_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Routers get sessions through `api.deps.db_session`; nothing here touches entities
# beyond registering them.
