"""
Configuration management for Open Alternatives.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Open Alternatives"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Database
    database_url: str = "sqlite+aiosqlite:///./openalt.db"

    # Public site
    site_url: str = "https://openalternatives.github.io"
    site_name: str = "Open Alternatives"
    publisher_logo_url: str = "https://openalternatives.github.io/logo.png"
    default_og_image: str = "/og-image.jpg"
    default_keywords: str = "open source, alternatives, free software"

    # Contact form -> GitHub issues
    github_api_url: str = "https://api.github.com"
    github_token: Optional[str] = Field(
        None, validation_alias=AliasChoices("OPENALT_GITHUB_TOKEN", "GITHUB_TOKEN")
    )
    github_repo: Optional[str] = Field(
        None, validation_alias=AliasChoices("OPENALT_GITHUB_REPO", "GITHUB_REPO")
    )  # "owner/repo"
    contact_timeout: float = 10.0  # seconds
    contact_default_labels: List[str] = ["contact-form"]

    # RDF Namespace
    openalt_namespace: str = "https://openalternatives.github.io/ontology#"
    openalt_data_namespace: str = "https://openalternatives.github.io/data/"

    class Config:
        env_prefix = "OPENALT_"
        env_file = ".env"
        extra = "ignore"
        populate_by_name = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
