"""
orm_lifecycle.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the driver routine and the HTTP surface.
- Hide the database URL from repr/logging (it may embed credentials).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ORM_LIFECYCLE_", case_sensitive=False)

    # dev/test create the schema and seed demo rows on startup; prod expects both to exist.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "orm-lifecycle"
    log_level: str = "INFO"

    # Persistence
    database_url: str = Field(default="sqlite:///./orm_lifecycle.db", repr=False)
    echo_sql: bool = False
    seed_demo_data: bool = True

    # Driver routine
    department_id: int = 1

    # HTTP surface
    api_host: str = "127.0.0.1"
    api_port: int = 8080

    @property
    def bootstraps_schema(self) -> bool:
        return self.env in ("dev", "test")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly; call `get_settings.cache_clear()` after
# changing ORM_LIFECYCLE_* variables in-process.
