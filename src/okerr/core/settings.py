"""Logging configuration for okerr, loaded with Pydantic Settings (v2).

`load_settings()` reads (highest precedence first):
- Real environment variables
- `.env` / `.env.local` files in the working directory

Nothing here writes to the process environment.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed configuration loaded from env and `.env` files.

    Attributes
    ----------
    log_level : LogLevelName
        Level for the `okerr` loggers; maps from `OKERR_LOG_LEVEL`. Contract
        violations (unwrapping the wrong variant, `err(None)`) are logged at DEBUG.
    """

    log_level: LogLevelName = Field(default="WARNING", alias="OKERR_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.WARNING)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests rebuild it via `load_settings.cache_clear()` after mutating `os.environ`.
    """
    return Settings()


def get_logger(name: str = "okerr") -> logging.Logger:
    """Return a non-propagating logger set to the configured level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
