"""Metadata resolver settings."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_flag

DEDUPE_BINDINGS_ENV = "NGMETA_DEDUPE_BINDINGS"


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    dedupe_bindings: bool = True


def get_resolver_config() -> ResolverConfig:
    return ResolverConfig(dedupe_bindings=env_flag(DEDUPE_BINDINGS_ENV, default=True))
