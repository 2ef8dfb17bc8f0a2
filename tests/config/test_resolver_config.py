from __future__ import annotations

import logging

import pytest

from ngmeta.config import (
    InvalidConfigurationError,
    LoggingConfig,
    ResolverConfig,
    get_logging_config,
    get_resolver_config,
)
from ngmeta.config.logging import LOG_LEVEL_ENV
from ngmeta.config.resolver import DEDUPE_BINDINGS_ENV


def test_resolver_config_defaults_to_dedupe() -> None:
    assert get_resolver_config() == ResolverConfig(dedupe_bindings=True)


def test_resolver_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(DEDUPE_BINDINGS_ENV, "false")

    assert get_resolver_config().dedupe_bindings is False


def test_logging_config_defaults_to_info() -> None:
    assert get_logging_config() == LoggingConfig(level=logging.INFO)


@pytest.mark.parametrize(("raw", "expected"), [("debug", logging.DEBUG), ("30", 30)])
def test_logging_config_parses_level(
    monkeypatch: pytest.MonkeyPatch,
    raw: str,
    expected: int,
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, raw)

    assert get_logging_config().level == expected


def test_logging_config_rejects_unknown_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")

    with pytest.raises(InvalidConfigurationError, match=LOG_LEVEL_ENV):
        get_logging_config()
