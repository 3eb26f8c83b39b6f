"""Application configuration utilities."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized configuration loaded from environment or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PUBLIST_",
        extra="ignore",
    )

    input_csv: Path = Field(
        default=Path("content/publication/pubs.csv"),
        description="CSV listing one publication per row.",
    )
    output_dir: Path = Field(
        default=Path("content/publication"),
        description="Directory receiving the generated front-matter files.",
    )
    rendered_dir: Optional[Path] = Field(
        default=None,
        description="Site output directory holding rendered publication pages to clear.",
    )
    self_author_prefix: str = Field(
        default="Taylor",
        description="Author string prefix identifying the site owner as first author.",
    )
    file_extension: str = Field(default="md")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
