"""
Sweeper Application Configuration

Configuration management using pydantic-settings.
Values are loaded from SWEEPER_* environment variables or a local .env file.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Values can be set via:
    1. Environment variables (SWEEPER_AI_ENABLED=true, ...)
    2. .env file (local development)
    3. Default values defined here
    """

    # =========================================================================
    # Application
    # =========================================================================
    app_name: str = "Sweeper"
    app_version: str = "1.2.0"
    debug: bool = False
    log_level: str = "INFO"

    # =========================================================================
    # Server
    # =========================================================================
    host: str = "127.0.0.1"
    port: int = Field(default=8000, description="HTTP port for the classification API")
    cors_origins: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # =========================================================================
    # Custom rules
    # =========================================================================
    custom_rules_path: str = Field(
        default="data/custom_rules.json",
        description="JSON file holding user URL patterns and keyword weights",
    )

    # =========================================================================
    # Model overlay (local inference only)
    # =========================================================================
    ai_enabled: bool = False
    ai_provider: str = "ollama"
    ai_base_url: str = Field(default="http://127.0.0.1:11434", description="Local inference server")
    ai_model: str = "gemma2:2b"
    ai_timeout_seconds: float = Field(default=3.0, gt=0, description="Model call timeout")

    class Config:
        env_prefix = "SWEEPER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Use get_settings.cache_clear() to reload settings.
    """
    return Settings()
