"""
Configuration management using Pydantic settings.
Handles database connection options, pool sizing and query defaults.
"""

from pydantic import Field, field_validator, ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from functools import lru_cache


class Settings(BaseSettings):
    """Data access settings read from the environment (LIGHTBNB_ prefix)."""

    # Application configuration
    app_name: str = "LightBnB"
    environment: str = "development"
    log_level: str = "INFO"

    # Individual database components
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_db: str = "lightbnb"

    # Full URL overrides the components when supplied
    database_url: Optional[str] = Field(default=None, validate_default=True)

    # Connection pool settings
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = 30
    pool_recycle: int = 3600
    echo_sql: bool = False

    # Query defaults
    default_limit: int = 10

    model_config = SettingsConfigDict(
        env_prefix="LIGHTBNB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("database_url", mode="after")
    @classmethod
    def build_database_url(cls, v: Optional[str], info: ValidationInfo) -> str:
        """Build database URL from components if not provided directly."""
        if not v:
            values = info.data
            return (
                f"postgresql+asyncpg://{values.get('postgres_user')}:{values.get('postgres_password')}"
                f"@{values.get('postgres_host')}:{values.get('postgres_port')}/{values.get('postgres_db')}"
            )

        # Ensure async driver is used
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        if v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @field_validator("pool_size", "default_limit")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be a positive integer")
        return v

    @property
    def is_sqlite(self) -> bool:
        """Check whether the configured store is SQLite."""
        return self.database_url.startswith("sqlite")

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one instance of settings throughout the process.
    """
    return Settings()
