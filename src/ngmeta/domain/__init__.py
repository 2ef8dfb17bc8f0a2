"""Directive metadata resolution core."""

from __future__ import annotations

from .errors import (
    ConflictingScopeQualifiersError,
    EmptyInjectionTokenError,
    MissingDirectiveAnnotationError,
    ResolutionError,
)
from .registry import AnnotationRegistry, default_registry
from .resolver import DirectiveResolver

__all__ = [
    "AnnotationRegistry",
    "ConflictingScopeQualifiersError",
    "DirectiveResolver",
    "EmptyInjectionTokenError",
    "MissingDirectiveAnnotationError",
    "ResolutionError",
    "default_registry",
]
