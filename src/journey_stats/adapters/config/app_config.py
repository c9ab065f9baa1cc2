"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from journey_stats.domain.models.distance_metric import DistanceMetric


def _normalize_distance_metric(value: str) -> str:
    value = value.lower()
    if value not in {m.value for m in DistanceMetric}:
        raise ValueError("distance_metric must be either 'euclidean' or 'haversine'")
    return value


def _normalize_timezone(value: str) -> str:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"timezone must be a valid IANA timezone name, got {value!r}") from e
    return value


def _normalize_log_level(value: str) -> str:
    level = value.upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"log_level must be a logging level name, got {value!r}")
    return level


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database configuration
    database_url: str = Field(
        default="sqlite:///journeys.db",
        description="SQLAlchemy URL of the journey store",
    )
    query_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Maximum time a single store query may take before it is reported as unavailable",
    )

    # Statistics configuration
    distance_metric: str = Field(
        default=DistanceMetric.EUCLIDEAN.value,
        description="Distance metric between passes: 'euclidean' (planar) or 'haversine' (km)",
    )
    timezone: str = Field(
        default="UTC",
        description="Timezone defining the start of the current day for period reports (IANA name)",
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    # Optional TOML file with [database] and [statistics] sections
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding the defaults above",
    )

    @field_validator("distance_metric")
    @classmethod
    def validate_distance_metric(cls, v: str) -> str:
        """Validate distance metric is either 'euclidean' or 'haversine'."""
        return _normalize_distance_metric(v)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        return _normalize_timezone(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        return _normalize_log_level(v)

    def model_post_init(self, __context: Any) -> None:
        """Apply TOML overrides once environment settings are loaded."""
        if self.config_file:
            self._apply_toml(self._load_toml_data())

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def _apply_toml(self, toml_data: dict[str, Any]) -> None:
        """Override settings from [database] and [statistics] sections."""
        database = toml_data.get("database", {})
        statistics = toml_data.get("statistics", {})

        if "url" in database:
            self.database_url = str(database["url"])
        if "query_timeout_seconds" in database:
            timeout = float(database["query_timeout_seconds"])
            if timeout <= 0:
                raise ValueError("query_timeout_seconds must be greater than 0")
            self.query_timeout_seconds = timeout
        if "distance_metric" in statistics:
            self.distance_metric = _normalize_distance_metric(str(statistics["distance_metric"]))
        if "timezone" in statistics:
            self.timezone = _normalize_timezone(str(statistics["timezone"]))
        if "log_level" in statistics:
            self.log_level = _normalize_log_level(str(statistics["log_level"]))
