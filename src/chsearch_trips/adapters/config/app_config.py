"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chsearch_trips.adapters.search_ch.constants import (
    COMPLETION_DAILY_QUOTA,
    ROUTE_DAILY_QUOTA,
    SEARCH_CH_BASE_URL,
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # API configuration
    api_base_url: str = Field(
        default=SEARCH_CH_BASE_URL, description="Base URL of the timetable.search.ch API"
    )
    api_timeout_seconds: int = Field(
        default=10, description="Timeout for API requests in seconds"
    )
    timezone: str = Field(
        default="Europe/Zurich",
        description="IANA timezone the API's local timestamps are expressed in",
    )
    trips_per_query: int | None = Field(
        default=None,
        description="Number of connections to request per query (API default if unset)",
    )

    # Rate limiting configuration
    route_min_delay_seconds: float = Field(
        default=1.0, description="Minimum delay between route queries in seconds"
    )
    route_daily_quota: int = Field(
        default=ROUTE_DAILY_QUOTA, description="Route queries allowed per day"
    )
    completion_daily_quota: int = Field(
        default=COMPLETION_DAILY_QUOTA, description="Location completion queries allowed per day"
    )

    # TOML config file path, optional
    config_file: str | None = Field(
        default=None,
        description="Path to a TOML file whose [api] section overrides these settings",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be an IANA timezone name, got '{v}'") from e
        return v

    @field_validator("trips_per_query")
    @classmethod
    def validate_trips_per_query(cls, v: int | None) -> int | None:
        """Validate trips_per_query is within the API's range."""
        if v is not None and not 1 <= v <= 16:
            raise ValueError("trips_per_query must be between 1 and 16")
        return v

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML file and apply its [api] section to this config.

        Returns the parsed TOML data, or an empty dict when no file is set.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api_config = toml_data.get("api", {})
        if not isinstance(api_config, dict):
            raise ValueError("TOML config 'api' must be a table")
        for key in (
            "api_base_url",
            "api_timeout_seconds",
            "timezone",
            "trips_per_query",
            "route_min_delay_seconds",
            "route_daily_quota",
            "completion_daily_quota",
        ):
            if key in api_config:
                setattr(self, key, api_config[key])
        return toml_data
