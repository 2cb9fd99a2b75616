import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from simplehttp.core.errors import ConfigurationError
from simplehttp.core.logging import get_logger

from .http import HTTPSettings
from .logging import LoggingSettings
from .pagination import PaginationSettings


__all__ = ["Settings", "get_settings"]


CONFIG_FILE_ENV = "SIMPLEHTTP_CONFIG_FILE"


class Settings(BaseSettings):
    """
    Configuration settings for simplehttp clients.

    Settings are loaded from environment variables prefixed with
    ``SIMPLEHTTP_`` (nested fields use ``__``, e.g.
    ``SIMPLEHTTP_HTTP__TIMEOUT=5``) and from .env files. A TOML file given to
    ``from_config`` or named by ``SIMPLEHTTP_CONFIG_FILE`` overrides both.
    """

    model_config = SettingsConfigDict(
        env_prefix="SIMPLEHTTP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    http: HTTPSettings = Field(
        default_factory=HTTPSettings,
        description="HTTP client configuration settings",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    pagination: PaginationSettings = Field(
        default_factory=PaginationSettings,
        description="Link pagination configuration",
    )

    @classmethod
    def load_toml_config(cls, toml_path: Path) -> dict[str, Any]:
        """Load configuration from a TOML file."""
        try:
            with toml_path.open("rb") as f:
                return tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read TOML config file {toml_path}: {e}", cause=e
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                f"Invalid TOML syntax in {toml_path}: {e}", cause=e
            ) from e

    @classmethod
    def from_config(
        cls,
        config_path: Path | str | None = None,
        **kwargs: Any,
    ) -> "Settings":
        """Create Settings from an optional TOML file plus keyword overrides."""
        if config_path is None:
            config_path_env = os.environ.get(CONFIG_FILE_ENV)
            if config_path_env:
                config_path = Path(config_path_env)

        if isinstance(config_path, str):
            config_path = Path(config_path)

        config_data: dict[str, Any] = {}
        if config_path is not None:
            if config_path.suffix.lower() != ".toml":
                raise ConfigurationError(
                    f"Unsupported config file format: {config_path.suffix}. "
                    "Only TOML (.toml) files are supported."
                )
            config_data = cls.load_toml_config(config_path)
            get_logger(__name__).info(
                "config_file_loaded",
                path=str(config_path),
                category="config",
            )

        return cls(**{**config_data, **kwargs})


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings.from_config()
