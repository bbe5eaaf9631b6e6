"""Configuration management using pydantic-settings.

**Not a singleton** -- each call to ``get_app_config()`` re-reads config
from disk so that edits to the YAML files are picked up.

Priority order (highest first):

1. Init kwargs (``AppConfig(ids=...)``)
2. Override YAML (path from ``HUMANID_CONFIG_FILE`` env var)
3. Environment variables (``HUMANID_`` prefix)
4. ``.env`` dotenv file
5. Static YAML (``configs/config.yaml``)
6. File secrets
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from .system import IdsConfig, LoggingConfig

# ---------------------------------------------------------------------------
# Path constants
# ---------------------------------------------------------------------------

CONFIG_PY_PATH = Path(__file__).resolve()
PROJECT_ROOT = CONFIG_PY_PATH.parent.parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "configs"

STATIC_CONFIG_FILE = CONFIG_DIR / "config.yaml"

DOTENV_FILE_PATH = PROJECT_ROOT / ".env"
ENV_DELIMITER = "__"  # Nested environment variable delimiter
ENV_PREFIX = "HUMANID_"
OVERRIDE_FILE_ENV = "HUMANID_CONFIG_FILE"

DEFAULT_ENCODING = "utf-8"


def get_override_config_file() -> Optional[Path]:
    """Path named by ``HUMANID_CONFIG_FILE``, or ``None`` when unset."""
    value = os.environ.get(OVERRIDE_FILE_ENV)
    return Path(value) if value else None


class AppConfig(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_file=DOTENV_FILE_PATH,
        env_file_encoding=DEFAULT_ENCODING,
        env_nested_delimiter=ENV_DELIMITER,
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
        yaml_file=STATIC_CONFIG_FILE,
        yaml_file_encoding=DEFAULT_ENCODING,
    )

    ids: IdsConfig = Field(
        default_factory=IdsConfig,
        description="Entity types of the application-wide ID registry",
    )

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging bootstrap settings",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings]

        override_file = get_override_config_file()
        if override_file is not None and override_file.is_file():
            sources.append(
                YamlConfigSettingsSource(settings_cls, yaml_file=override_file)
            )

        sources.append(env_settings)
        sources.append(dotenv_settings)
        sources.append(YamlConfigSettingsSource(settings_cls))
        sources.append(file_secret_settings)

        return tuple(sources)


def get_app_config() -> AppConfig:
    """Get the application configuration (re-read on every call)."""
    return AppConfig()
