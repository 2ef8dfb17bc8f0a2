"""Logging configuration for ngmeta entry points."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .env import optional_env_var
from .errors import InvalidConfigurationError

LOG_LEVEL_ENV = "NGMETA_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level: int = logging.INFO


def _parse_level(value: str) -> int:
    if value.isdigit():
        return int(value)
    level = logging.getLevelNamesMapping().get(value.upper())
    if level is None:
        raise InvalidConfigurationError(f"Invalid log level for {LOG_LEVEL_ENV}: {value}")
    return level


def get_logging_config() -> LoggingConfig:
    value = optional_env_var(LOG_LEVEL_ENV)
    if value is None:
        return LoggingConfig()
    return LoggingConfig(level=_parse_level(value))


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Route ngmeta log records (resolver debug traces, CLI failures) to stderr.

    ``level`` overrides ``NGMETA_LOG_LEVEL``. ``force`` replaces handlers already
    installed on the root logger.
    """

    effective_level = level if level is not None else get_logging_config().level
    logging.basicConfig(
        level=effective_level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
