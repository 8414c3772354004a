from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import API_BASE, DEFAULT_PER_PAGE

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (env or .env). CLI options override these."""

    model_config = SettingsConfigDict(env_prefix="", env_file=None, extra="ignore")

    github_username: str | None = Field(default_factory=lambda: os.getenv("GITHUB_USERNAME"))
    github_token: str | None = Field(default_factory=lambda: os.getenv("GITHUB_TOKEN"))
    github_api_base: str = Field(default=API_BASE)
    per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1, le=100, validation_alias="REPO_EXPORTER_PER_PAGE")
    use_ssh: bool = Field(default=False, validation_alias="REPO_EXPORTER_USE_SSH")


def get_settings() -> Settings:
    return Settings()
