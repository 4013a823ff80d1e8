"""
Configuration module for the JSON event layout.

Uses pydantic-settings for environment-based configuration.
The logging framework owns where these values come from; the layout only
reads the resolved Settings.
"""

import logging
from datetime import tzinfo
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Layout settings loaded from LOGSTASH_LAYOUT_* environment variables."""

    location_info: bool = True
    ignore_throwable: bool = False
    timezone: Optional[str] = None
    source_host: Optional[str] = None
    log_level: str = "INFO"

    class Config:
        env_prefix = "LOGSTASH_LAYOUT_"
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def tz(self) -> Optional[tzinfo]:
        """
        Resolve the configured IANA timezone name.

        Returns:
            ZoneInfo for the configured name, or None for local time.

        Raises:
            ValueError: If the timezone name is unknown.
        """
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            logger.error(
                "Unknown timezone",
                extra={"timezone": self.timezone, "error": str(e)},
            )
            raise ValueError(f"Unknown timezone {self.timezone!r}") from e

    @property
    def parsed_log_level(self) -> int:
        """Numeric logging level for log_level, INFO when unrecognised."""
        level = logging.getLevelName(self.log_level.strip().upper())
        return level if isinstance(level, int) else logging.INFO


@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
