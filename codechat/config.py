"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = "development"
    app_debug: bool = False
    app_host: str = "0.0.0.0"
    app_port: int = Field(default=3000, validation_alias=AliasChoices("port", "app_port"))
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["*"]

    # User codes
    user_code_length: int = 6
    code_max_attempts: int = 10  # Regenerations before giving up on a collision

    # Admin endpoints
    admin_api_key: str = ""  # API key for /health/detailed

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
