# /halaqat-backend/app/core/config.py

"""
Environment-driven configuration.

The only setting the storage layer depends on is `DATABASE_URL`: its presence
selects a persistent backend, its absence selects the in-memory store. The
remaining settings tune logging and demo seeding.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    # Field names match the environment variables case-insensitively,
    # e.g. DATABASE_URL -> database_url. Empty variables count as unset.
    model_config = SettingsConfigDict(extra="ignore", env_ignore_empty=True)

    database_url: Optional[str] = None
    document_db_name: str = "halaqat"
    log_level: str = "INFO"
    log_format: str = "plain"  # 'plain' or 'json'
    seed_sample_data: bool = True

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("log_format")
    @classmethod
    def _lower_format(cls, v: str) -> str:
        return v.strip().lower()


def get_settings() -> Settings:
    """Reads the current environment. Called once per application start."""
    return Settings()
