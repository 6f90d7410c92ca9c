"""
Configuration management using Pydantic Settings
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from TRANSITION_* environment variables"""

    model_config = SettingsConfigDict(env_prefix="TRANSITION_", env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="json",
        description="Log format: 'json' for structured logging, 'console' for development"
    )
    max_document_bytes: int = Field(
        default=64 * 1024, ge=1, description="Largest accepted upload, in bytes"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return v


@lru_cache()
def get_settings() -> Settings:
    return Settings()
