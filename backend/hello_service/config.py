"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every field defaults to the compiled-in value: no environment needed
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - HELLO_SERVICE_ prefix so generic names (PORT, HOST) set by hosts are not picked up
    - extra="ignore": a shared .env with other services' keys must not stop startup
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hello_service.core.service_info import SERVICE_PORT


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HELLO_SERVICE_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Listener
    host: str = "0.0.0.0"
    port: int = Field(SERVICE_PORT, ge=1, le=65535)

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
