"""
Application configuration.

Loads settings from environment variables and .env file.
Every setting has a default suitable for local development.
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (interactive docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        storage_backend: "sql" for Postgres via SQLAlchemy, "memory" for
            the in-process store.
        db_schema: Schema that holds the shop tables. Empty string
            disables schema qualification.
        create_schema_on_startup: Create missing tables when the app starts.
        seed_sample_data: Insert the sample catalog when it is empty.
        rate_limit_enabled: Toggle request rate limiting.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Storefront API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    storage_backend: Literal["sql", "memory"] = "sql"

    # Postgres settings
    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "storefront"
    db_schema: str = "storefront"
    create_schema_on_startup: bool = True
    seed_sample_data: bool = True

    # Rate limiting
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    def get_database_url(self) -> str:
        """Return the effective async SQLAlchemy URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build an asyncpg DSN from the postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
