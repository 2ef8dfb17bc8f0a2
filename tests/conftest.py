from __future__ import annotations

import pytest

from ngmeta.config import ResolverConfig
from ngmeta.config.logging import LOG_LEVEL_ENV
from ngmeta.config.resolver import DEDUPE_BINDINGS_ENV
from ngmeta.domain import AnnotationRegistry, DirectiveResolver


@pytest.fixture(autouse=True)
def _clean_ngmeta_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(DEDUPE_BINDINGS_ENV, raising=False)


@pytest.fixture
def resolver() -> DirectiveResolver:
    return DirectiveResolver(config=ResolverConfig())


@pytest.fixture
def registry() -> AnnotationRegistry:
    return AnnotationRegistry()
