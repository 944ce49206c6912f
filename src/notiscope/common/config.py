"""Application configuration using Pydantic Settings."""

import logging
from typing import Literal

from pydantic_settings import BaseSettings

from notiscope.common.constants import DEFAULT_REDACT_KEYS


class NotiScopeConfig(BaseSettings):
    """Collector configuration loaded from environment variables."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Re-raise handler failures instead of logging and dropping them
    strict: bool = False

    serializer_max_depth: int = 10
    serializer_redact_keys: tuple[str, ...] = DEFAULT_REDACT_KEYS

    trace_limit: int = 50
    trace_skip_modules: tuple[str, ...] = ("notiscope",)

    model_config = {"env_prefix": "NOTISCOPE_", "case_sensitive": False}


def configure_logging(config: NotiScopeConfig | None = None) -> logging.Logger:
    """Apply the configured log level to the package logger."""
    config = config or NotiScopeConfig()
    logger = logging.getLogger("notiscope")
    logger.setLevel(config.log_level)
    return logger


__all__ = ["NotiScopeConfig", "configure_logging"]
