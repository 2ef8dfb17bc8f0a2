"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class BindingKind(StrEnum):
    """Ordered binding sequences of a directive, keyed by their metadata field."""

    INPUTS = "inputs"
    OUTPUTS = "outputs"
    ATTRS = "attrs"


class QueryKind(StrEnum):
    CONTENT_CHILD = "content_child"
    CONTENT_CHILDREN = "content_children"
    VIEW_CHILD = "view_child"
    VIEW_CHILDREN = "view_children"


class DeclarationKind(StrEnum):
    DIRECTIVE = "directive"
    COMPONENT = "component"
