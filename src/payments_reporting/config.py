"""
Configuration for payments-reporting.

Settings are read from environment variables, after loading an optional
``.env`` file, searched for upward from the working directory. Variables
already present in the environment take precedence over the file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "PAYMENTS_REPORTING_"
DEFAULT_TIMEZONE = "UTC"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class ConfigurationError(Exception):
    """Raised when an environment setting has an unusable value."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings"""

    timezone: str = DEFAULT_TIMEZONE
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(f"Unknown timezone: {self.timezone!r}") from e

        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Settings:
        load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)
        return cls(
            timezone=os.getenv(f"{ENV_PREFIX}TIMEZONE", DEFAULT_TIMEZONE),
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Install a stream handler on the root logger for applications.

    Library code never calls this; it only logs through module loggers.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("payments_reporting").setLevel(level.upper())
