"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - The API secret comes from the environment (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - Empty api_key disables the auth gate; empty CORS list registers no CORS middleware

Design Decisions:
    - Values read from the environment and .env through pydantic-settings
    - cors_allowed_origins kept as the raw comma-separated string, parsed by cors_origins
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from model_service.core.auth_gate import DEFAULT_API_KEY_HEADER


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./models.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Plain postgresql:// URLs need the asyncpg driver for the async engine."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Security
    api_key: str = ""
    api_key_header: str = DEFAULT_API_KEY_HEADER

    @field_validator("api_key_header", mode="before")
    @classmethod
    def default_blank_header(cls, v: str | None) -> str:
        if v is None or not str(v).strip():
            return DEFAULT_API_KEY_HEADER
        return str(v).strip()

    # API
    cors_allowed_origins: str = ""
    trace_id_header: str = "X-Trace-Id"
    host: str = "0.0.0.0"
    port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def cors_origins(self) -> list[str]:
        return [
            origin.strip()
            for origin in self.cors_allowed_origins.split(",")
            if origin.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    return Settings()
