"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    catalog_data_dir: Path = Path("data")
    catalog_output_file: Path = Path("data/catalog.json")
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = None
    openai_store: bool = False
    search_limit: int = 50
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
