"""Configuration adapters."""

from journey_stats.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
