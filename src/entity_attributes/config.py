"""Configuration management for entity attributes using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NAMESPACE = "additionalentityattributes"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="ENTITY_ATTRIBUTES_",
        extra="ignore",
    )

    # Registry
    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        description="Namespace prefix for registry identifiers",
    )
    catalog_path: Path | None = Field(
        default=None,
        description="Optional YAML file with extra attribute definitions",
    )

    # Loot
    random_seed: int | None = Field(
        default=None,
        description="Seed for the loot random source (unset = system entropy)",
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format (console or json)")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
