"""Class-declaration builder API.

``@directive``/``@component`` record the class-level declaration and then
collect the member annotations found in the class body, in definition order::

    @directive(selector="[clicker]", inputs=["one"])
    class Clicker:
        inside = Input("outsideAlias")
        is_disabled = HostBinding("class.disabled")

        @inject(pane=Inject("pane", host=True, optional=True))
        def __init__(self, pane): ...

        @HostListener("mousemove", ["$event.target"])
        def on_move(self, target): ...

Field markers are removed from the class once recorded and decorated methods
are restored to the plain function.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, cast

from ngmeta.domain.model import (
    AnnotatedMember,
    Attr,
    ComponentAnnotation,
    ContentChild,
    ContentChildren,
    DirectiveAnnotation,
    HostBinding,
    HostListener,
    Inject,
    Input,
    MemberAnnotation,
    Output,
    ParameterAnnotation,
    ViewChild,
    ViewChildren,
)
from ngmeta.domain.registry import default_registry

if TYPE_CHECKING:
    from collections.abc import Callable

    from ngmeta.domain.model import PropertyAnnotation
    from ngmeta.domain.registry import AnnotationRegistry

PARAMETERS_ATTR = "__ngmeta_parameters__"

_SKIPPED_PARAMETER_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def directive[T: type[object]](
    *,
    selector: str,
    registry: AnnotationRegistry | None = None,
    **payload: Any,
) -> Callable[[T], T]:
    """Declare the decorated class as a directive."""

    declaration = DirectiveAnnotation.model_validate({"selector": selector, **payload})

    def decorate(cls: T) -> T:
        return _declare(cls, declaration, registry or default_registry)

    return decorate


def component[T: type[object]](
    *,
    selector: str,
    registry: AnnotationRegistry | None = None,
    **payload: Any,
) -> Callable[[T], T]:
    """Declare the decorated class as a component."""

    declaration = ComponentAnnotation.model_validate({"selector": selector, **payload})

    def decorate(cls: T) -> T:
        return _declare(cls, declaration, registry or default_registry)

    return decorate


def inject[F: Callable[..., Any]](**injections: Inject) -> Callable[[F], F]:
    """Attach injection facts to a constructor, keyed by parameter name.

    Parameters without an entry are recorded as unannotated so the recorded
    facts cover the whole signature in declaration order.
    """

    for name, injection in injections.items():
        if not isinstance(injection, Inject):
            raise TypeError(f"Expected Inject(...) for parameter {name!r}, got {injection!r}")

    def decorate(init: F) -> F:
        names = [
            parameter.name
            for parameter in inspect.signature(init).parameters.values()
            if parameter.kind not in _SKIPPED_PARAMETER_KINDS
        ][1:]
        unknown = sorted(set(injections) - set(names))
        if unknown:
            raise TypeError(f"{init.__qualname__} has no parameter(s): {', '.join(unknown)}")
        parameters = tuple(
            ParameterAnnotation(name=name, inject=injections.get(name)) for name in names
        )
        setattr(init, PARAMETERS_ATTR, parameters)
        return init

    return decorate


def _declare[T: type[object]](
    cls: T,
    declaration: DirectiveAnnotation,
    registry: AnnotationRegistry,
) -> T:
    registry.declare(cls, declaration)
    _collect_member_annotations(cls, registry)
    _collect_parameter_annotations(cls, registry)
    return cls


def _collect_member_annotations(cls: type[object], registry: AnnotationRegistry) -> None:
    for name, value in list(vars(cls).items()):
        if isinstance(value, AnnotatedMember):
            for annotation in value.annotations:
                registry.annotate_property(cls, name, cast("PropertyAnnotation", annotation))
            setattr(cls, name, value.member)
        elif isinstance(value, MemberAnnotation):
            registry.annotate_property(cls, name, cast("PropertyAnnotation", value))
            delattr(cls, name)


def _collect_parameter_annotations(cls: type[object], registry: AnnotationRegistry) -> None:
    init = vars(cls).get("__init__")
    parameters: tuple[ParameterAnnotation, ...] | None = getattr(init, PARAMETERS_ATTR, None)
    if parameters is not None:
        registry.annotate_parameters(cls, parameters)


__all__ = [
    "Attr",
    "ContentChild",
    "ContentChildren",
    "HostBinding",
    "HostListener",
    "Inject",
    "Input",
    "Output",
    "ViewChild",
    "ViewChildren",
    "component",
    "directive",
    "inject",
]
