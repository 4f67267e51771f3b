"""Application configuration from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Fitness Tracker API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_prefix: str = "/api"

    # Server (uvicorn)
    host: str = "0.0.0.0"
    port: int = 8080
    timeout_keep_alive: int = 30  # seconds an idle connection is held open

    # Database (PostgreSQL)
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "fitness"
    database_password: str = ""  # Set in .env - never commit
    database_name: str = "fitness_tracker"
    database_ssl_mode: str = "disable"
    # Full async URL, wins over the host/port fields (e.g. sqlite+aiosqlite:///./fitness.db)
    database_url_override: str = ""

    # Pool
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # No migration tooling: let the app create missing tables on startup
    create_tables: bool = True

    # CORS: comma-separated list of allowed origins outside development
    cors_origins: str = ""

    def _build_db_url(self, scheme: str = "postgresql", ssl_query: str = "sslmode=disable") -> str:
        user = quote_plus(self.database_user)
        password = quote_plus(self.database_password)
        return (
            f"{scheme}://{user}:{password}@{self.database_host}:{self.database_port}"
            f"/{self.database_name}?{ssl_query}"
        )

    @property
    def async_database_url(self) -> str:
        """Async URL for the engine (asyncpg driver unless overridden)."""
        if self.database_url_override:
            return self.database_url_override
        return self._build_db_url(scheme="postgresql+asyncpg", ssl_query=f"ssl={self.database_ssl_mode}")

    @property
    def is_sqlite(self) -> bool:
        return self.async_database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
