"""Pydantic settings models for Pi-hole Monitor configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Literal, Tuple, Type
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads values from a YAML file.

    The YAML file path is determined by the CONFIG_PATH environment variable.
    """

    def get_field_value(
        self, field: Any, field_name: str
    ) -> Tuple[Any, str, bool]:
        """Get field value from YAML config."""
        yaml_config = self._load_yaml_config()
        field_value = yaml_config.get(field_name)
        return field_value, field_name, False

    def _load_yaml_config(self) -> Dict[str, Any]:
        """Load YAML configuration file."""
        config_path = os.environ.get("CONFIG_PATH")
        if not config_path:
            return {}

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)
                return data if isinstance(data, dict) else {}
        except (FileNotFoundError, yaml.YAMLError, PermissionError):
            # Errors will be handled by loader.py
            return {}

    def __call__(self) -> Dict[str, Any]:
        """Return the YAML config values."""
        return self._load_yaml_config()


class PiholeSettings(BaseSettings):
    """Pi-hole Monitor configuration settings.

    Configuration is loaded in the following precedence (highest to lowest):
    1. Environment variables (PIHOLE_ prefix)
    2. Docker secrets (_FILE pattern, applied via env)
    3. YAML configuration file (via CONFIG_PATH)
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="PIHOLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Appliance connection
    base_url: str = Field(
        ...,
        description="Pi-hole base URL, preferably by IP (e.g. http://192.168.178.10)",
    )
    password: str = Field(
        default="",
        description="Fallback admin password when none is stored in the secret store",
    )
    auth_endpoint: str = Field(
        default="/api/auth",
        description="Path of the session authentication endpoint",
    )
    stats_endpoint: str = Field(
        default="/api/stats/summary",
        description="Path of the statistics summary endpoint",
    )
    login_timeout: float = Field(
        default=10,
        description="Timeout in seconds for the login request",
        gt=0,
    )
    stats_timeout: float = Field(
        default=10,
        description="Timeout in seconds for the statistics request",
        gt=0,
    )
    verify_ssl: bool = Field(
        default=True,
        description="Verify TLS certificates when base_url uses https",
    )
    logout_after_fetch: bool = Field(
        default=True,
        description="Release the API session after each fetch",
    )

    # Local storage
    state_dir: str = Field(
        default="~/.pihole-monitor",
        description="Directory holding the secret store file",
    )
    password_key: str = Field(
        default="pihole_admin_password_v1",
        description="Secret store key of the admin password",
    )
    cache_key: str = Field(
        default="pihole_monitor_cache_v1",
        description="Secret store key of the cached statistics snapshot",
    )

    # Scheduling
    refresh_hours: float = Field(
        default=6,
        description="Interval between scheduled refreshes in hours",
        gt=0,
    )

    # Status thresholds
    error_stale_minutes: float = Field(
        default=120,
        description="Cache age in minutes at which an offline appliance is an error",
        gt=0,
    )
    clients_warn_max: int = Field(
        default=1,
        description="Client count at or below which a warning is raised",
        ge=0,
    )
    delta_window_minutes: float = Field(
        default=30,
        description="Maximum age of the previous sample for the query delta check",
        gt=0,
    )
    min_query_delta: int = Field(
        default=10,
        description="Minimum number of new queries expected within the delta window",
        ge=0,
    )

    # Rendering
    locale: Literal["de_DE", "en_US"] = Field(
        default="de_DE",
        description="Locale for number, time and status text formatting",
    )
    display_timezone: str = Field(
        default="UTC",
        description="IANA timezone for displayed timestamps",
    )
    form_factor: Literal["small", "medium", "large"] = Field(
        default="medium",
        description="Default layout size",
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log output format: json (production) or text (development)",
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
        """Customize settings sources to set precedence.

        Order (first = highest priority):
        1. init_settings (constructor arguments)
        2. env_settings (environment variables with PIHOLE_ prefix)
        3. dotenv_settings (.env file)
        4. yaml_settings (CONFIG_PATH YAML file)
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
        )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL"}
        normalized = v.upper()
        if normalized == "WARN":
            normalized = "WARNING"
        if normalized not in valid_levels:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: DEBUG, INFO, WARNING, ERROR"
            )
        return normalized

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and strip the trailing slash."""
        v = v.strip()
        if not v:
            raise ValueError("Base URL cannot be empty")
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("display_timezone")
    @classmethod
    def validate_display_timezone(cls, v: str) -> str:
        """Require an IANA timezone name known to zoneinfo."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{v}'") from e
        return v

    @field_validator("auth_endpoint", "stats_endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Endpoints are absolute paths."""
        v = v.strip()
        if not v.startswith("/"):
            v = "/" + v
        return v

    @property
    def state_path(self) -> Path:
        """Expanded state directory."""
        return Path(self.state_dir).expanduser()

    @property
    def secrets_file(self) -> Path:
        """Location of the file-backed secret store."""
        return self.state_path / "secrets.json"
