"""Application configuration using pydantic-settings."""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Prime personal loan thresholds
    PRIME_MIN_ANNUAL_INCOME: int = 1_000_000
    PRIME_MIN_CREDIT_SCORE: int = 750

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def log_level_value(self) -> int:
        """Resolve LOG_LEVEL to a logging level number, falling back to INFO."""
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO


# Global settings instance
settings = Settings()
