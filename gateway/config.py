"""Configuration management with layered settings.

Precedence, lowest first: field defaults, ``config.yaml``, ``.env``, ``APP_*``
environment variables.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Literal, Optional, Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

CONFIG_FILE_ENV = "APP_CONFIG_FILE"
CONFIG_SEARCH_PATHS = (Path("config.yaml"), Path("config") / "config.yaml")


def resolve_config_file() -> Optional[Path]:
    """Return the YAML config file to load, if any."""
    explicit = os.environ.get(CONFIG_FILE_ENV)
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    for path in CONFIG_SEARCH_PATHS:
        if path.is_file():
            return path
    return None


class Settings(BaseSettings):
    # Application
    app_name: str = "Provider Gateway"
    version: str = "1.0.0"
    environment: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: str = "8080"
    cors_origins: List[str] = []

    # Completion provider
    completion_api_key: str = ""
    completion_model: str = "gpt-3.5-turbo"
    completion_base_url: Optional[str] = None

    # Storage provider
    storage_endpoint: str = "localhost:9000"
    storage_key: str = ""
    storage_secret: str = ""
    storage_secure: bool = False
    storage_region: str = "us-east-1"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        sources = [init_settings, env_settings, dotenv_settings]
        config_file = resolve_config_file()
        if config_file is not None:
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=config_file))
        return tuple(sources)

    @property
    def completion_enabled(self) -> bool:
        return bool(self.completion_api_key)

    @property
    def storage_enabled(self) -> bool:
        return bool(self.storage_key and self.storage_secret)

    def is_production(self) -> bool:
        return self.environment.lower() == "production"


def load_settings() -> Settings:
    return Settings()


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
