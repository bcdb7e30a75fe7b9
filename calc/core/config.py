"""
Interpreter configuration.

Centralized configuration management with environment variables.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Interpreter settings"""

    model_config = SettingsConfigDict(
        env_prefix="CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Parsing
    REQUIRE_EOF: bool = True
    ALLOW_STATEMENT_TOKENS: bool = True
    MAX_SOURCE_LENGTH: int = 100_000


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
