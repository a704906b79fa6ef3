"""Configuration management for the application."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_URL = "sqlite:///./tender.db"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default=DEFAULT_DATABASE_URL)

    # Sessions
    session_backend: Literal["memory", "redis"] = Field(default="memory")
    redis_url: str = Field(default="redis://localhost:6379/0")
    session_ttl_minutes: int = Field(default=10080)  # 7 days

    # Anthropic API (for fridge scanning with Claude Vision)
    anthropic_api_key: str | None = Field(default=None)
    vision_model: str = Field(default="claude-sonnet-4-20250514")

    # Discovery
    discover_default_limit: int = Field(default=10, gt=0)
    discover_max_limit: int = Field(default=50, gt=0)

    # Startup
    seed_sample_recipes: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    # API
    environment: str = Field(default="development")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has a real database."""
        if self.environment == "production" and self.database_url == DEFAULT_DATABASE_URL:
            raise ValueError("DATABASE_URL must be set in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
