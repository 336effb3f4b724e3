"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables  (JINA_READER__SERVER__TRANSPORT=http)
  3. .env file in the working directory
  4. jina-reader.yaml       (searched in cwd, then the platform config dir)
  5. Hardcoded defaults

The API key is read from ``JINA_API_KEY`` (or ``JINA_READER__API_KEY``). It is
optional at load time; a missing key only fails the first tool call.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_CONFIG_FILENAME = "jina-reader.yaml"
_DEFAULT_CONFIG_DIR = platformdirs.user_config_dir("jina-reader-mcp")


def _find_config_file() -> str | None:
    """Return the path of the first jina-reader.yaml found, or None."""
    candidates = [
        Path(_CONFIG_FILENAME),
        Path(_DEFAULT_CONFIG_DIR) / _CONFIG_FILENAME,
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class ServerSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    transport: Literal["stdio", "http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8080


class UpstreamSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_url: str = "https://r.jina.ai/"
    timeout_seconds: float = 60.0


class CacheSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    ttl_hours: float = 3


class PaginationSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default_max_length: int = Field(default=20000, gt=0)
    # Slice every page from character 0, as earlier releases did.
    legacy_slice: bool = False


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: JINA_READER__SERVER__PORT=9090
        env_prefix="JINA_READER__",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
        populate_by_name=True,
        # A shared .env usually holds keys for other tools. Section models still
        # forbid unknown keys.
        extra="ignore",
    )

    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("JINA_API_KEY", "JINA_READER__API_KEY"),
    )
    server: ServerSettings = ServerSettings()
    upstream: UpstreamSettings = UpstreamSettings()
    cache: CacheSettings = CacheSettings()
    pagination: PaginationSettings = PaginationSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            dotenv_settings,  # .env in cwd, where JINA_API_KEY usually lives
            YamlConfigSettingsSource(settings_cls),  # YAML file
        )
