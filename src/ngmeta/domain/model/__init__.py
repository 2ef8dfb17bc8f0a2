"""Public domain model surface."""

from __future__ import annotations

from ngmeta.domain.model.annotations import (
    ALIAS_SEPARATOR,
    Attr,
    BindingAnnotation,
    HostAnnotation,
    HostBinding,
    HostListener,
    Inject,
    InjectionToken,
    Input,
    Output,
    ParameterAnnotation,
    PropertyAnnotation,
)
from ngmeta.domain.model.declarations import ComponentAnnotation, DirectiveAnnotation
from ngmeta.domain.model.enums import BindingKind, DeclarationKind, QueryKind
from ngmeta.domain.model.members import AnnotatedMember, MemberAnnotation
from ngmeta.domain.model.metadata import ComponentMetadata, DirectiveMetadata
from ngmeta.domain.model.queries import (
    ContentChild,
    ContentChildren,
    QueryDescriptor,
    QueryTarget,
    ViewChild,
    ViewChildren,
)

__all__ = [  # noqa: RUF022
    # members
    "MemberAnnotation",
    "AnnotatedMember",
    # property annotations
    "ALIAS_SEPARATOR",
    "BindingAnnotation",
    "Input",
    "Output",
    "Attr",
    "HostAnnotation",
    "HostBinding",
    "HostListener",
    "PropertyAnnotation",
    # queries
    "QueryDescriptor",
    "QueryTarget",
    "ContentChild",
    "ContentChildren",
    "ViewChild",
    "ViewChildren",
    # parameters
    "Inject",
    "InjectionToken",
    "ParameterAnnotation",
    # declarations
    "DirectiveAnnotation",
    "ComponentAnnotation",
    # resolved records
    "DirectiveMetadata",
    "ComponentMetadata",
    # enums
    "BindingKind",
    "DeclarationKind",
    "QueryKind",
]
