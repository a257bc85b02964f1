import logging
import os

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings


_log = logging.getLogger(__name__)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    PROJECT_NAME: str = "onion-site-hooks"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Optional runtime; onion services usually bind to loopback behind tor
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # pydantic v2 style config
    model_config = ConfigDict(
        env_file=os.getenv("ENV_FILE", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    def _normalize_log_level(cls, v):
        if v is None:
            return "INFO"
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return level


settings = Settings()
_log.debug("Loaded settings for %s (log level %s)", settings.PROJECT_NAME, settings.LOG_LEVEL)
