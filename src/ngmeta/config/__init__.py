"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, optional_env_var
from .errors import ConfigurationError, InvalidConfigurationError
from .logging import LoggingConfig, configure_logging, get_logging_config
from .resolver import ResolverConfig, get_resolver_config

__all__ = [
    "ConfigurationError",
    "InvalidConfigurationError",
    "LoggingConfig",
    "ResolverConfig",
    "configure_logging",
    "env_flag",
    "get_logging_config",
    "get_resolver_config",
    "optional_env_var",
]
