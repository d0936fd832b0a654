from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings from environment variables (MAILCHECK_*)."""

    model_config = SettingsConfigDict(
        env_prefix="MAILCHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Typo detection
    typo_threshold: int = Field(default=2, ge=0)
    alphabet_size: int = Field(default=128, ge=1)
    # Accept catalog domains without asking the oracle
    trust_known_domains: bool = Field(default=False)

    # Oracle
    # 0 disables caching of oracle answers
    oracle_cache_ttl_hours: int = Field(default=24, ge=0)

    # Application
    debug: bool = Field(default=False)
    config_path: str = Field(default="config.yml")


class CatalogConfig:
    """Domain catalog configuration from config.yml."""

    def __init__(self, data: dict[str, Any]) -> None:
        self.domains: list[str] = data.get("domains", [])


class AppConfig:
    """Combined configuration from .env and config.yml."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self._load_yaml()

    def _load_yaml(self) -> None:
        config_path = Path(self.settings.config_path)
        if config_path.exists():
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        else:
            data = {}

        self.catalog = CatalogConfig(data.get("catalog") or {})


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_config() -> AppConfig:
    """Get cached full config instance."""
    return AppConfig(get_settings())
