"""Errors raised while resolving directive metadata and requirements."""

from __future__ import annotations


class ResolutionError(RuntimeError):
    """Raised when annotations on a class cannot be resolved."""


class MissingDirectiveAnnotationError(ResolutionError):
    """Raised when a class carries no ``@directive``/``@component`` declaration."""

    def __init__(self, type_: type[object]) -> None:
        self.type_ = type_
        super().__init__(f"No Directive annotation found on {type_.__name__}")


class EmptyInjectionTokenError(ResolutionError):
    """Raised when a host-scoped parameter resolves to an empty directive name."""

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__("no Directive instance name provided within @Inject()")


class ConflictingScopeQualifiersError(ResolutionError):
    """Raised when a parameter asks for both the current and the parent scope."""

    def __init__(self, parameter: str, dependency: str) -> None:
        self.parameter = parameter
        self.dependency = dependency
        super().__init__(
            f"you cannot provide both @Self() and @SkipSelf() for @Inject({dependency})"
        )
